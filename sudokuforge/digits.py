"""Digit values and their display characters.

A digit of a puzzle of size ``n`` is an ``int`` in ``range(n)``; the value 0
is shown as ``1``, the value 9 as ``A`` and so on.
"""

from __future__ import annotations

DIGIT_CHARS = "123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def digit_char(value: int) -> str:
    """Return the character that displays ``value``."""
    if not 0 <= value < len(DIGIT_CHARS):
        raise ValueError(f"no display character for digit {value}")
    return DIGIT_CHARS[value]


def check_digit(value: int, size: int) -> int:
    """Return ``value`` if it is a valid digit for ``size``, else raise ValueError."""
    if not 0 <= value < size:
        raise ValueError(f"digit {value} is out of range for size {size}")
    return value


def offset(value: int, delta: int, size: int) -> int | None:
    """Return ``value + delta`` if it is still a valid digit, otherwise None."""
    moved = value + delta
    if 0 <= moved < size:
        return moved
    return None


def digit_range(size: int, start: int | None = None, stop: int | None = None) -> range:
    """Return the digits from ``start`` (default 0) up to ``stop`` (default ``size``)."""
    first = 0 if start is None else check_digit(start, size)
    last = size if stop is None else stop
    if not 0 <= last <= size:
        raise ValueError(f"stop {last} is out of range for size {size}")
    return range(first, last)