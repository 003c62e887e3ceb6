from __future__ import annotations

from typing import Optional


class OrderError(Exception):
    """Base exception for order loading and reversal."""


class OrderParseError(OrderError, ValueError):
    """A line of the order file is malformed or a numeric field fails to convert."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class NullInputError(OrderError, TypeError):
    """A reversal was requested without an input sequence."""

    def __init__(self, argument: str = "orders") -> None:
        super().__init__(f"Argument '{argument}' must not be None")
        self.argument = argument
