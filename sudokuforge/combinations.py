"""Fixed-length combinations in lexicographic order."""

from __future__ import annotations

import itertools
from collections.abc import Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


def combinations(items: Sequence[T], length: int) -> Iterator[tuple[T, ...]]:
    """Yield every ``length``-element combination of ``items`` in input order.

    Nothing is yielded when ``length`` is zero or larger than ``len(items)``.
    """
    if length <= 0 or length > len(items):
        return
    yield from itertools.combinations(items, length)