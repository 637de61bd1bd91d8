"""Offset enumeration for fixed-length windows.

Two construction paths produce the same offset set:

- counted: the closed range ``[0, size - length]``, computed up front
- filtered: every offset in ``[0, size)``, kept when its window fits

``ROLLING`` shares the counted offsets; it differs only in how window sums are
computed (see ``window.py``).
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Callable, Iterable


@unique
class OffsetStrategy(Enum):
    """How the valid window offsets are built."""
    COUNTED = "counted"
    FILTERED = "filtered"
    ROLLING = "rolling"


def _require_int(name: str, v: object) -> int:
    if not isinstance(v, int) or isinstance(v, bool):
        raise TypeError(f"{name} must be an int")
    return v


def window_fits(offset: int, size: int, length: int) -> bool:
    """True when the window at ``offset`` lies entirely within ``size``."""
    return offset + length <= size


def offsets_counted(size: int, length: int) -> range:
    _require_int("size", size)
    _require_int("length", length)
    # range() is empty when length > size
    return range(0, size - length + 1)


def offsets_filtered(size: int, length: int) -> tuple[int, ...]:
    _require_int("size", size)
    _require_int("length", length)
    return tuple(i for i in range(size) if window_fits(i, size, length))


_DISPATCH: dict[OffsetStrategy, Callable[[int, int], Iterable[int]]] = {
    OffsetStrategy.COUNTED: offsets_counted,
    OffsetStrategy.FILTERED: offsets_filtered,
    OffsetStrategy.ROLLING: offsets_counted,
}


def parse_strategy(value: OffsetStrategy | str) -> OffsetStrategy:
    """Accept an ``OffsetStrategy`` or its string value."""
    if isinstance(value, OffsetStrategy):
        return value
    if isinstance(value, str):
        try:
            return OffsetStrategy(value.strip().lower())
        except ValueError:
            pass
    choices = ", ".join(s.value for s in OffsetStrategy)
    raise ValueError(f"unknown strategy {value!r} (expected one of: {choices})")


def enumerate_offsets(size: int, length: int, strategy: OffsetStrategy | str) -> tuple[int, ...]:
    """Valid window offsets, ascending, built with ``strategy``."""
    if _require_int("length", length) <= 0:
        raise ValueError(f"length must be positive: {length}")
    fn = _DISPATCH[parse_strategy(strategy)]
    return tuple(fn(size, length))
