from josephus_simulator.core.errors import InvalidArgumentError, JosephusError
from josephus_simulator.engine.josephus import (
    get_crossed_out_persons,
    get_survivor,
    validate_input_parameters,
)

__all__ = [
    "InvalidArgumentError",
    "JosephusError",
    "get_crossed_out_persons",
    "get_survivor",
    "validate_input_parameters",
]
