from __future__ import annotations  # noqa: INP001

import logging

from josephus_simulator.engine.josephus import get_crossed_out_persons, get_survivor
from josephus_simulator.engine.logging import configure_logging
from josephus_simulator.simulation.config import SweepConfig
from josephus_simulator.simulation.runner import run_sweep
from josephus_simulator.simulation.telemetry import SweepSummary

if __name__ == "__main__":
    configure_logging(logging.DEBUG)

    count, crossed_out = 41, 3
    order = list(get_crossed_out_persons(count, crossed_out))
    survivor = get_survivor(count, crossed_out)
    print(f"Crossed out: {order}")
    print(f"Survivor: {survivor}")

    configure_logging(logging.INFO)
    summary = SweepSummary()
    for result in run_sweep(SweepConfig(counts=list(range(1, 42))), progress=True):
        summary.on_result(result)

    print(f"Runs: {summary.total_runs}, eliminations: {summary.total_eliminations}")
    print(f"Inconsistent: {len(summary.inconsistent)}")
