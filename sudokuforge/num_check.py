"""Candidate notes of a single cell."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .digits import check_digit

MIN_SIZE = 2
MAX_SIZE = 64


class NumCheck:
    """The set of digits still possible for a cell.

    Candidates are kept in insertion order, but removal swaps the last
    candidate into the freed slot, so the order is not sorted in general.
    """

    __slots__ = ("size", "_index", "_true", "_final", "_fixed")

    def __init__(self, size: int) -> None:
        if size < MIN_SIZE:
            raise ValueError(f"puzzle size must be at least {MIN_SIZE}")
        if size > MAX_SIZE:
            raise ValueError(f"puzzle size cannot exceed {MAX_SIZE}")
        self.size = size
        self._index: list[int | None] = [None] * size
        self._true: list[int] = []
        self._final: int | None = None
        self._fixed: int | None = None

    @classmethod
    def all_true(cls, size: int) -> NumCheck:
        """Notes with every digit possible."""
        note = cls(size)
        note.restrict_to(range(size))
        return note

    @classmethod
    def all_false(cls, size: int) -> NumCheck:
        """Notes with no digit possible."""
        return cls(size)

    def _check(self, num: int) -> int:
        return check_digit(num, self.size)

    def _update_final(self) -> None:
        self._final = self._true[0] if len(self._true) == 1 else None

    def minimum(self) -> int | None:
        """Smallest possible digit, or None if there is none."""
        return next((n for n, slot in enumerate(self._index) if slot is not None), None)

    def candidates(self) -> list[int]:
        """Copy of the possible digits, in storage order."""
        return list(self._true)

    def set(self, num: int, flag: bool) -> None:
        """Mark ``num`` possible or impossible."""
        if flag:
            self.add(num)
        else:
            self.discard(num)

    def add(self, num: int) -> None:
        """Mark ``num`` possible."""
        self._check(num)
        if self._index[num] is not None:
            return
        self._true.append(num)
        self._index[num] = len(self._true) - 1
        self._update_final()

    def discard(self, num: int) -> None:
        """Mark ``num`` impossible."""
        self._check(num)
        position = self._index[num]
        if position is None:
            return
        last = self._true.pop()
        if position < len(self._true):
            self._true[position] = last
            self._index[last] = position
        self._index[num] = None
        self._update_final()

    def restrict_to(self, values: Iterable[int]) -> None:
        """Make exactly ``values`` possible, keeping their first-seen order."""
        self._index = [None] * self.size
        self._true = []
        for num in values:
            self._check(num)
            if self._index[num] is not None:
                continue
            self._index[num] = len(self._true)
            self._true.append(num)
        self._update_final()

    def clear(self) -> None:
        """Mark every digit impossible."""
        self._index = [None] * self.size
        self._true = []
        self._final = None

    def fix(self, value: int) -> None:
        """Settle the cell on ``value``."""
        self._check(value)
        self._index = [None] * self.size
        self._index[value] = 0
        self._true = [value]
        self._final = value

    def discard_all(self, values: Iterable[int]) -> None:
        """Mark every digit in ``values`` impossible."""
        for num in values:
            self.discard(num)

    def is_solved(self) -> bool:
        """True when exactly one digit is possible."""
        return len(self._true) == 1

    def solved_value(self) -> int | None:
        """The settled digit, or None when the cell is not settled."""
        return self._final

    def same_notes(self, other: NumCheck) -> bool:
        """True when both notes allow exactly the same digits."""
        return all(
            (a is None) == (b is None) for a, b in zip(self._index, other._index)
        ) and self.size == other.size

    def intersection(self, other: NumCheck) -> NumCheck:
        """New notes holding the digits possible in both."""
        result = NumCheck.all_false(self.size)
        for num in self._true:
            if num in other:
                result.add(num)
        return result

    def merge_into(self, other: NumCheck) -> None:
        """Add every digit possible here to ``other``."""
        for num in self._true:
            other.add(num)

    def count(self) -> int:
        """Number of possible digits."""
        return len(self._true)

    def bit_flag(self) -> int:
        """Bit mask with bit ``n`` set for every possible digit ``n``."""
        mask = 0
        for num in self._true:
            mask |= 1 << num
        return mask

    def validate(self) -> None:
        """Raise ValueError if the internal bookkeeping is inconsistent."""
        marked = [n for n, slot in enumerate(self._index) if slot is not None]
        if len(marked) != len(self._true):
            raise ValueError("candidate count does not match the index")
        for num in marked:
            slot = self._index[num]
            if slot >= len(self._true) or self._true[slot] != num:
                raise ValueError(f"index of digit {num} is stale")
        if len(self._true) == 1 and self._final != self.minimum():
            raise ValueError("settled value does not match the only candidate")
        if len(self._true) != 1 and self._final is not None:
            raise ValueError("settled value set on an unsettled cell")

    def fixed_value(self) -> int | None:
        """The answer remembered before the cell was punched out."""
        return self._fixed

    def clear_fixed(self) -> None:
        """Forget the remembered answer."""
        self._fixed = None

    def remember_fixed(self) -> None:
        """Remember the current settled value as the answer."""
        self._fixed = self._final

    def copy(self) -> NumCheck:
        """Independent copy of these notes."""
        duplicate = NumCheck(self.size)
        duplicate._index = list(self._index)
        duplicate._true = list(self._true)
        duplicate._final = self._final
        duplicate._fixed = self._fixed
        return duplicate

    def __contains__(self, num: object) -> bool:
        return isinstance(num, int) and 0 <= num < self.size and self._index[num] is not None

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._true))

    def __len__(self) -> int:
        return len(self._true)

    def __repr__(self) -> str:
        return f"NumCheck(size={self.size}, candidates={sorted(self._true)})"