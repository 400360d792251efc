"""A list with a fixed maximum length."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar, overload

T = TypeVar("T")


class BoundedVector(Generic[T]):
    """A sequence that behaves like a list but never grows past ``capacity``.

    ``swap_remove`` and ``remove_from_right`` fill the freed slot with the last
    element, so they do not keep the order of the remaining elements.
    """

    __slots__ = ("capacity", "_items")

    def __init__(self, capacity: int, items: Iterable[T] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self.capacity = capacity
        self._items: list[T] = []
        for value in items:
            self.append(value)

    def append(self, value: T) -> None:
        """Add ``value`` at the end; raise OverflowError when the vector is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError(
                f"BoundedVector cannot hold more than {self.capacity} elements"
            )
        self._items.append(value)

    def pop(self) -> T | None:
        """Remove and return the last element, or None when empty."""
        if not self._items:
            return None
        return self._items.pop()

    def get(self, index: int) -> T | None:
        """Element at ``index``, or None when ``index`` is out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def swap_remove(self, index: int) -> T | None:
        """Remove the element at ``index`` by moving the last element into its place.

        Returns the removed element, or None when ``index`` is out of range.
        """
        if not 0 <= index < len(self._items):
            return None
        removed = self._items[index]
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
        return removed

    def remove_at(self, index: int) -> T | None:
        """Remove the element at ``index``, shifting the rest left.

        Returns the removed element, or None when ``index`` is out of range.
        """
        if not 0 <= index < len(self._items):
            return None
        return self._items.pop(index)

    def remove_from_right(self, predicate: Callable[[T], bool]) -> list[T]:
        """Walk from the last element to the first, swap-removing those matching ``predicate``.

        Returns the removed elements in the order they were removed.
        """
        removed: list[T] = []
        for index in reversed(range(len(self._items))):
            if predicate(self._items[index]):
                item = self.swap_remove(index)
                removed.append(item)  # type: ignore[arg-type]
        return removed

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def sort(self) -> None:
        """Sort the elements in place."""
        self._items.sort()  # type: ignore[call-arg]

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return self._items[index]
        if not -len(self._items) <= index < len(self._items):
            raise IndexError(
                f"index out of bounds: the len is {len(self._items)} but the index is {index}"
            )
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        if not -len(self._items) <= index < len(self._items):
            raise IndexError(
                f"index out of bounds: the len is {len(self._items)} but the index is {index}"
            )
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundedVector):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._items) + "]"

    def __repr__(self) -> str:
        return f"BoundedVector({self._items!r}, capacity={self.capacity})"