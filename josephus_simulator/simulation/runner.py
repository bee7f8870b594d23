from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from tqdm import tqdm

from josephus_simulator.engine.josephus import get_crossed_out_persons, get_survivor
from josephus_simulator.simulation.telemetry import EliminationResult

if TYPE_CHECKING:
    from collections.abc import Iterator

    from josephus_simulator.simulation.config import SweepConfig

logger = logging.getLogger("josephus_simulator")


def run_single(count: int, crossed_out: int, *, verify: bool = True) -> EliminationResult:
    """
    Run the elimination for one input and compute its survivor.

    With `verify`, the only position never crossed out must equal the
    closed-form survivor; a mismatch is logged and flagged on the result.
    """
    start = time.perf_counter()
    order = tuple(get_crossed_out_persons(count, crossed_out))
    survivor = get_survivor(count, crossed_out)
    elapsed_ms = (time.perf_counter() - start) * 1000

    consistent = True
    if verify:
        # sum(1..count) minus everyone crossed out leaves the one left standing
        left_standing = count * (count + 1) // 2 - sum(order)
        consistent = (
            len(set(order)) == count - 1
            and all(1 <= p <= count for p in order)
            and left_standing == survivor
        )
        if not consistent:
            logger.warning(
                "!!! Survivor mismatch for count=%d crossed_out=%d: "
                "simulated %d, computed %d",
                count,
                crossed_out,
                left_standing,
                survivor,
            )

    return EliminationResult(
        count=count,
        crossed_out=crossed_out,
        elimination_order=order,
        survivor=survivor,
        consistent=consistent,
        execution_time_ms=elapsed_ms,
    )


def run_sweep(config: SweepConfig, *, progress: bool = False) -> Iterator[EliminationResult]:
    """Lazily run every combination the config selects."""
    combinations = config.iter_combinations()
    with tqdm(desc="Eliminating", unit="run", disable=not progress) as pbar:
        for count, crossed_out in combinations:
            result = run_single(count, crossed_out, verify=config.verify_survivor)
            logger.info(
                "[%s] count=%d crossed_out=%d Survivor is person %d",
                result.config_hash[:8],
                count,
                crossed_out,
                result.survivor,
            )
            pbar.update(1)
            yield result
