from typing import override

from josephus_simulator.core.types import ParameterName


class JosephusError(Exception):
    pass


class InvalidArgumentError(JosephusError, ValueError):
    """Raised when `count` or `crossed_out` is below 1."""

    def __init__(self, parameter: ParameterName, value: int, message: str) -> None:
        super().__init__(message)
        self.parameter: ParameterName = parameter
        self.value: int = value
        self.message: str = message

    @override
    def __str__(self) -> str:
        return f"{self.message} (parameter: {self.parameter}, value: {self.value})"
