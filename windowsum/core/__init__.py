"""
Core window digit-sum algorithms
"""

from .digits import DigitString, digit_sum, digit_values, first_invalid_index
from .errors import InvalidCharacterError, InvalidLengthError, NoValidWindowError, WindowSumError
from .offsets import (
    OffsetStrategy,
    enumerate_offsets,
    offsets_counted,
    offsets_filtered,
    parse_strategy,
    window_fits,
)
from .window import (
    WindowSumResult,
    default_window_length,
    evaluate,
    evaluate_or_raise,
    max_window_digit_sum,
    window_sums,
)

__all__ = [
    "DigitString",
    "digit_sum",
    "digit_values",
    "first_invalid_index",
    "WindowSumError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "NoValidWindowError",
    "OffsetStrategy",
    "enumerate_offsets",
    "offsets_counted",
    "offsets_filtered",
    "parse_strategy",
    "window_fits",
    "WindowSumResult",
    "default_window_length",
    "evaluate",
    "evaluate_or_raise",
    "max_window_digit_sum",
    "window_sums",
]
