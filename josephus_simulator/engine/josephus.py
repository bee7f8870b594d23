"""
Josephus elimination engine.

People 1..count stand in a circle. Starting from person 1, `crossed_out - 1`
people are skipped and the next one is crossed out, until one person remains.
See https://en.wikipedia.org/wiki/Josephus_problem.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from josephus_simulator.core.errors import InvalidArgumentError
from josephus_simulator.core.state import CircleState, LogContext
from josephus_simulator.engine import ENGINE_ID_COUNTER

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger("josephus_simulator")


def validate_input_parameters(count: int, crossed_out: int) -> None:
    if count < 1:
        raise InvalidArgumentError(
            "count",
            count,
            "Count must be greater than or equal to 1.",
        )

    if crossed_out < 1:
        raise InvalidArgumentError(
            "crossed_out",
            crossed_out,
            "Crossed out must be greater than 0.",
        )


def get_crossed_out_persons(count: int, crossed_out: int) -> Iterator[int]:
    """
    Return an iterator over the persons crossed out, in order.

    Arguments are checked here, before the first element is requested.
    The iterator yields `count - 1` positions; the survivor is never yielded.

    Raises:
        InvalidArgumentError: `count` or `crossed_out` is less than 1.
    """
    validate_input_parameters(count, crossed_out)

    log_context = LogContext(
        engine_id=next(ENGINE_ID_COUNTER),
        count=count,
        crossed_out=crossed_out,
    )
    return _crossed_out_persons_iterator(count, crossed_out, log_context)


def _crossed_out_persons_iterator(
    count: int,
    crossed_out: int,
    log_context: LogContext,
) -> Iterator[int]:
    circle = CircleState.seeded(count)

    while circle.remaining > 1:
        circle.skip(crossed_out - 1)
        person = circle.cross_out()

        log_context.round += 1
        logger.debug(
            "Eliminated person %d (%d left)",
            person,
            circle.remaining,
            extra=log_context.as_extra(),
        )
        yield person

    logger.debug(
        "Survivor is person %d",
        circle.persons[0],
        extra=log_context.as_extra(),
    )


def get_survivor(count: int, crossed_out: int) -> int:
    """
    Return the original position of the last survivor.

    Uses the recurrence J(1) = 0, J(i) = (J(i - 1) + crossed_out) mod i on
    0-based indices, so no elimination is simulated.

    Raises:
        InvalidArgumentError: `count` or `crossed_out` is less than 1.
    """
    validate_input_parameters(count, crossed_out)

    survivor = 0
    for i in range(2, count + 1):
        survivor = (survivor + crossed_out) % i

    return survivor + 1
