"""
Insertion-ordered set. Used where first-seen order of distinct values must survive dedup
(parsed skills and qualifications).
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSet
from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class OrderedSet(MutableSet, Generic[T]):
    """Set that remembers the order values were first added. Re-adding keeps the original slot."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        # dict keys keep insertion order; values are unused
        self._items: dict[T, None] = {}
        self.update(values)

    def add(self, value: T) -> None:
        self._items.setdefault(value, None)

    def discard(self, value: T) -> None:
        self._items.pop(value, None)

    def update(self, values: Iterable[T]) -> None:
        for value in values:
            self.add(value)

    def to_list(self) -> list[T]:
        return list(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"
