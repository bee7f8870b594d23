import hashlib
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class EliminationResult:
    count: int
    crossed_out: int
    elimination_order: tuple[int, ...]
    survivor: int
    consistent: bool
    execution_time_ms: float

    @property
    def config_hash(self) -> str:
        payload = f"{self.count}:{self.crossed_out}".encode()
        return hashlib.sha256(payload).hexdigest()[:16]


@dataclass(slots=True)
class SweepSummary:
    """
    Accumulates results of a sweep.
    """

    results: list[EliminationResult] = field(default_factory=list)

    def on_result(self, result: EliminationResult) -> None:
        self.results.append(result)

    @property
    def total_runs(self) -> int:
        return len(self.results)

    @property
    def total_eliminations(self) -> int:
        return sum(len(r.elimination_order) for r in self.results)

    @property
    def total_time_ms(self) -> float:
        return sum(r.execution_time_ms for r in self.results)

    @property
    def inconsistent(self) -> list[EliminationResult]:
        return [r for r in self.results if not r.consistent]

    def survivor_table(self) -> dict[tuple[int, int], int]:
        return {(r.count, r.crossed_out): r.survivor for r in self.results}
