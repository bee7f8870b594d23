from collections import deque
from dataclasses import dataclass, field


@dataclass(slots=True)
class LogContext:
    engine_id: int
    count: int
    crossed_out: int
    round: int = 0

    def as_extra(self) -> dict[str, int]:
        return {
            "engine_id": self.engine_id,
            "count": self.count,
            "crossed_out": self.crossed_out,
            "round": self.round,
        }


@dataclass(slots=True)
class CircleState:
    """People still standing, front of the deque is the next to be counted."""

    persons: deque[int] = field(default_factory=deque)

    @classmethod
    def seeded(cls, count: int) -> "CircleState":
        return cls(persons=deque(range(1, count + 1)))

    @property
    def remaining(self) -> int:
        return len(self.persons)

    def skip(self, times: int) -> None:
        # One person at a time, front to back
        for _ in range(times):
            self.persons.append(self.persons.popleft())

    def cross_out(self) -> int:
        return self.persons.popleft()
