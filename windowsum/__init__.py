"""`windowsum`: maximum digit-sum over fixed-length windows of a digit string.

Public API:
- `max_window_digit_sum(text, length) -> int` (raises on invalid input)
- `evaluate(text, length) -> WindowSumResult` (rejects instead of raising)
"""

from .core import (
    InvalidCharacterError,
    InvalidLengthError,
    NoValidWindowError,
    OffsetStrategy,
    WindowSumError,
    WindowSumResult,
    default_window_length,
    evaluate,
    evaluate_or_raise,
    max_window_digit_sum,
    window_sums,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidCharacterError",
    "InvalidLengthError",
    "NoValidWindowError",
    "OffsetStrategy",
    "WindowSumError",
    "WindowSumResult",
    "default_window_length",
    "evaluate",
    "evaluate_or_raise",
    "max_window_digit_sum",
    "window_sums",
]
