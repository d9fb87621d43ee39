"""
Ordered sets of surreal numbers.

Two structurally different trees can denote the same number ({-1 | 1}
and { | } are both zero), so membership cannot be decided by hashing or
identity. A NumberSet keeps its elements sorted under the surreal order
and treats numerically equal elements as one; when an equal element is
already present the one inserted first is kept.
"""

from __future__ import annotations
import bisect
from typing import Iterable, Iterator, List, Tuple


class NumberSet:
    """Immutable, ascending, comparator-keyed set of numbers."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable = ()):
        ordered: List = []
        for item in items:
            i = bisect.bisect_left(ordered, item)
            if i < len(ordered) and ordered[i] == item:
                continue
            ordered.insert(i, item)
        self._items: Tuple = tuple(ordered)

    @classmethod
    def of(cls, items: Iterable = ()) -> NumberSet:
        """Return ``items`` unchanged if it is already a NumberSet."""
        if isinstance(items, cls):
            return items
        return cls(items)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __reversed__(self) -> Iterator:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __getitem__(self, index: int):
        return self._items[index]

    def __contains__(self, item) -> bool:
        i = bisect.bisect_left(self._items, item)
        return i < len(self._items) and self._items[i] == item

    def min(self):
        """Smallest element."""
        if not self._items:
            raise ValueError("min() of an empty NumberSet")
        return self._items[0]

    def max(self):
        """Greatest element."""
        if not self._items:
            raise ValueError("max() of an empty NumberSet")
        return self._items[-1]

    def union(self, *others: Iterable) -> NumberSet:
        """Elements of this set followed by those of ``others`` not already present."""
        items = list(self._items)
        for other in others:
            items.extend(other)
        return NumberSet(items)

    def __or__(self, other: NumberSet) -> NumberSet:
        return self.union(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, NumberSet):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None

    def __repr__(self) -> str:
        return f"NumberSet({list(self._items)!r})"
