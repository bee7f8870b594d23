"""Configuration schema for batch elimination sweeps using msgspec."""

from __future__ import annotations

import itertools
from pathlib import Path
from typing import TYPE_CHECKING

import msgspec

if TYPE_CHECKING:
    from collections.abc import Iterator


class CombinationFilter(msgspec.Struct):
    """
    Exclusion rule.
    A (count, crossed_out) pair matching every non-empty set is skipped.
    """

    # Empty set = matches any count.
    counts: set[int] = msgspec.field(default_factory=set)

    # Empty set = matches any step size.
    crossed_outs: set[int] = msgspec.field(default_factory=set)

    def matches(self, count: int, crossed_out: int) -> bool:
        if self.counts and count not in self.counts:
            return False
        return not (self.crossed_outs and crossed_out not in self.crossed_outs)


class SweepConfig(msgspec.Struct):
    """TOML-backed configuration for running the engine over many inputs."""

    counts: list[int] = msgspec.field(default_factory=lambda: [1, 2, 3, 5, 7, 10])
    crossed_outs: list[int] = msgspec.field(default_factory=lambda: [1, 2, 3])

    filters: list[CombinationFilter] = msgspec.field(default_factory=list)

    # Execution limits
    max_total_runs: int | None = None

    # Compare the simulated survivor against the closed-form one
    verify_survivor: bool = True

    @classmethod
    def from_toml(cls, path: str) -> SweepConfig:
        """Load configuration from a TOML file path."""
        with Path(path).open("rb") as f:
            return msgspec.toml.decode(f.read(), type=cls)

    def iter_combinations(self) -> Iterator[tuple[int, int]]:
        """Yield (count, crossed_out) pairs in grid order, filtered and capped."""
        emitted = 0
        for count, crossed_out in itertools.product(self.counts, self.crossed_outs):
            if self.max_total_runs is not None and emitted >= self.max_total_runs:
                return
            if any(f.matches(count, crossed_out) for f in self.filters):
                continue
            emitted += 1
            yield count, crossed_out
