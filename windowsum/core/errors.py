"""Exception types for the window digit-sum kernel.

Raised by ``evaluate_or_raise()`` and ``max_window_digit_sum()`` in
``window.py`` for callers that prefer exceptions over ``WindowSumResult``
inspection.
"""

from __future__ import annotations


class WindowSumError(ValueError):
    """Base class for domain failures of the window digit-sum kernel."""


class InvalidCharacterError(WindowSumError):
    """Raised when the input holds a character outside '0'-'9'."""

    def __init__(self, index: int, char: str) -> None:
        self.index = index
        self.char = char
        super().__init__(f"non-digit character {char!r} at index {index}")


class InvalidLengthError(WindowSumError):
    """Raised when the requested window length is not positive."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"window length must be positive: {length}")


class NoValidWindowError(WindowSumError):
    """Raised when no offset yields a complete window."""

    def __init__(self, length: int, size: int) -> None:
        self.length = length
        self.size = size
        super().__init__(f"window length {length} exceeds input length {size}")
