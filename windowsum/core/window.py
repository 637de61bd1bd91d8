"""Maximum bounded-window digit-sum.

``evaluate(text, length)`` is the single entry point. It:

1. Validates the input (digits, then length, then window fit).
2. Builds the valid offsets with the requested ``OffsetStrategy``.
3. Sums each window and reduces to the maximum.
4. Returns a ``WindowSumResult`` (accepted or rejected with reason).

``evaluate_or_raise()`` and ``max_window_digit_sum()`` raise the typed errors
from ``errors.py`` instead of returning a rejected result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn

from .digits import DigitString, first_invalid_index
from .errors import InvalidCharacterError, InvalidLengthError, NoValidWindowError
from .offsets import OffsetStrategy, enumerate_offsets, parse_strategy


REJECT_INVALID_CHARACTER = "invalid_character"
REJECT_INVALID_LENGTH = "invalid_length"
REJECT_NO_VALID_WINDOW = "no_valid_window"


@dataclass(frozen=True)
class WindowSumResult:
    """Outcome of one evaluation."""

    accepted: bool
    length: int
    value: int | None = None
    best_offsets: tuple[int, ...] = ()
    rejection: str | None = None


def default_window_length(size: int) -> int:
    """``ceil(size / 2)``, never below 1."""
    if not isinstance(size, int) or isinstance(size, bool):
        raise TypeError("size must be an int")
    if size < 0:
        raise ValueError(f"size must be non-negative: {size}")
    return max(1, -(-size // 2))


def _validate(text: str, length: int) -> str | None:
    """Check the input domain. Returns rejection reason or None."""
    bad = first_invalid_index(text)
    if bad is not None:
        return f"{REJECT_INVALID_CHARACTER}:{bad}"
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError("length must be an int")
    if length <= 0:
        return REJECT_INVALID_LENGTH
    if length > len(text):
        return REJECT_NO_VALID_WINDOW
    return None


def _sums_direct(values: tuple[int, ...], length: int, offsets: tuple[int, ...]) -> tuple[int, ...]:
    return tuple(sum(values[i:i + length]) for i in offsets)


def _sums_rolling(values: tuple[int, ...], length: int) -> tuple[int, ...]:
    # Slide by dropping values[i - length] and adding values[i].
    current = sum(values[:length])
    out = [current]
    for i in range(length, len(values)):
        current += values[i] - values[i - length]
        out.append(current)
    return tuple(out)


def _window_sums_unchecked(
    digits: DigitString, length: int, strategy: OffsetStrategy
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    offsets = enumerate_offsets(len(digits), length, strategy)
    if strategy is OffsetStrategy.ROLLING:
        return offsets, _sums_rolling(digits.values, length)
    return offsets, _sums_direct(digits.values, length, offsets)


def evaluate(
    text: str,
    length: int,
    *,
    strategy: OffsetStrategy | str = OffsetStrategy.COUNTED,
) -> WindowSumResult:
    """Compute the maximum window digit-sum of ``text`` for windows of ``length``.

    Returns ``WindowSumResult`` with ``accepted=True`` on success,
    or ``accepted=False`` with a ``rejection`` reason string.
    """
    strategy = parse_strategy(strategy)
    reason = _validate(text, length)
    if reason is not None:
        return WindowSumResult(accepted=False, length=length, rejection=reason)

    offsets, sums = _window_sums_unchecked(DigitString(text), length, strategy)
    best = max(sums)
    best_offsets = tuple(i for i, s in zip(offsets, sums) if s == best)
    return WindowSumResult(accepted=True, length=length, value=best, best_offsets=best_offsets)


def evaluate_or_raise(
    text: str,
    length: int,
    *,
    strategy: OffsetStrategy | str = OffsetStrategy.COUNTED,
) -> WindowSumResult:
    """Like ``evaluate()`` but raises on rejection instead of returning a result.

    Raises:
        InvalidCharacterError: ``text`` holds a non-digit character.
        InvalidLengthError: ``length`` is not positive.
        NoValidWindowError: ``length`` exceeds ``len(text)``.
    """
    result = evaluate(text, length, strategy=strategy)
    if result.accepted:
        return result
    _raise_rejection(result.rejection or "", text, length)


def _raise_rejection(reason: str, text: str, length: int) -> NoReturn:
    if reason.startswith(f"{REJECT_INVALID_CHARACTER}:"):
        index = int(reason.split(":", 1)[1])
        raise InvalidCharacterError(index, text[index])
    if reason == REJECT_INVALID_LENGTH:
        raise InvalidLengthError(length)
    raise NoValidWindowError(length, len(text))


def max_window_digit_sum(
    text: str,
    length: int,
    *,
    strategy: OffsetStrategy | str = OffsetStrategy.COUNTED,
) -> int:
    """Maximum digit-sum over every contiguous window of ``length`` characters."""
    result = evaluate_or_raise(text, length, strategy=strategy)
    assert result.value is not None
    return result.value


def window_sums(
    text: str,
    length: int,
    *,
    strategy: OffsetStrategy | str = OffsetStrategy.COUNTED,
) -> tuple[int, ...]:
    """Digit-sum of every valid window, in ascending offset order."""
    strategy = parse_strategy(strategy)
    reason = _validate(text, length)
    if reason is not None:
        _raise_rejection(reason, text, length)
    _offsets, sums = _window_sums_unchecked(DigitString(text), length, strategy)
    return sums
