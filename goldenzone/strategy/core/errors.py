"""
Errors raised by the Golden Zone engine.
"""


class GoldenZoneError(Exception):
    """Base class for engine errors."""


class EmptyInputError(GoldenZoneError, ValueError):
    """Raised when a function that needs at least one price bar receives none."""


class InsufficientDataError(GoldenZoneError, ValueError):
    """Raised when a price history is too short for the backtest window and horizon."""

    def __init__(self, required: int, actual: int):
        self.required = required
        self.actual = actual
        super().__init__(
            f"Backtest needs more than {required} bars of history, got {actual}."
        )
