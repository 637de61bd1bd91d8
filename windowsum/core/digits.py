"""Digit strings: validation and digit-value parsing.

Only the ASCII digits '0'..'9' are accepted; superscripts and other Unicode
decimal forms are rejected.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidCharacterError


DIGITS = frozenset("0123456789")


def _require_str(text: object) -> str:
    if not isinstance(text, str):
        raise TypeError(f"digits must be a str, got {type(text).__name__}")
    return text


def first_invalid_index(text: str) -> int | None:
    """Index of the first non-digit character, or None when all are digits."""
    for i, ch in enumerate(_require_str(text)):
        if ch not in DIGITS:
            return i
    return None


def digit_values(text: str) -> tuple[int, ...]:
    """Integer value of each character; raises on the first non-digit."""
    bad = first_invalid_index(text)
    if bad is not None:
        raise InvalidCharacterError(bad, text[bad])
    return tuple(ord(ch) - ord("0") for ch in text)


def digit_sum(text: str) -> int:
    return sum(digit_values(text))


@dataclass(frozen=True)
class DigitString:
    """Immutable, validated sequence of decimal digit characters."""

    text: str

    def __post_init__(self) -> None:
        bad = first_invalid_index(self.text)
        if bad is not None:
            raise InvalidCharacterError(bad, self.text[bad])

    def __len__(self) -> int:
        return len(self.text)

    @property
    def values(self) -> tuple[int, ...]:
        return tuple(ord(ch) - ord("0") for ch in self.text)

    def window(self, offset: int, length: int) -> str:
        """Substring of ``length`` characters starting at ``offset``."""
        return self.text[offset:offset + length]
