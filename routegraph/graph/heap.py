"""
Array-backed binary heap with a caller-supplied priority predicate.

The predicate is consulted on every comparison and no priority is ever
stored, so it may read live state (for example a PathTracker whose costs
change between operations). The same element may be enqueued several
times; stale copies are re-evaluated when they surface.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

E = TypeVar("E")


class Heap(Generic[E]):
    """
    Binary heap ordered by higher(a, b), which returns True when a should
    leave the heap before b.

    Children of index i live at 2i+1 and 2i+2. Each entry carries its
    insertion number next to the element. When neither element is higher
    than the other, the one inserted first leaves first.
    """

    def __init__(
        self,
        higher: Callable[[E, E], bool],
        elements: Iterable[E] = (),
    ) -> None:
        """
        Initialize the heap.

        Args:
            higher: Strict priority predicate, re-evaluated on every comparison
            elements: Initial contents, heapified on construction
        """
        self._higher = higher
        self._entries: list[tuple[int, E]] = list(enumerate(elements))
        self._inserted = len(self._entries)
        for index in range(len(self._entries) // 2 - 1, -1, -1):
            self._sift_down(index)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def peek(self) -> E | None:
        """Highest-priority element without removing it, or None if empty."""
        return self._entries[0][1] if self._entries else None

    def enqueue(self, element: E) -> None:
        """Insert element and restore heap order. O(log n) comparisons."""
        self._entries.append((self._inserted, element))
        self._inserted += 1
        self._sift_up(len(self._entries) - 1)

    def dequeue_highest_priority(self) -> E | None:
        """Remove and return the highest-priority element, or None if empty."""
        if not self._entries:
            return None
        if len(self._entries) == 1:
            return self._entries.pop()[1]

        self._swap(0, len(self._entries) - 1)
        _, element = self._entries.pop()
        self._sift_down(0)
        return element

    # =========================================================================
    # Internals
    # =========================================================================

    def _swap(self, first: int, second: int) -> None:
        entries = self._entries
        entries[first], entries[second] = entries[second], entries[first]

    def _is_higher(self, first: int, second: int) -> bool:
        first_order, first_element = self._entries[first]
        second_order, second_element = self._entries[second]
        if self._higher(first_element, second_element):
            return True
        if self._higher(second_element, first_element):
            return False
        return first_order < second_order

    def _sift_up(self, child: int) -> None:
        while child > 0:
            parent = (child - 1) // 2
            if not self._is_higher(child, parent):
                return
            self._swap(child, parent)
            child = parent

    def _highest_priority_index(self, parent: int) -> int:
        """Index of the best of parent and its (existing) children."""
        count = len(self._entries)
        best = parent
        left = 2 * parent + 1
        right = left + 1
        if left < count and self._is_higher(left, best):
            best = left
        if right < count and self._is_higher(right, best):
            best = right
        return best

    def _sift_down(self, parent: int) -> None:
        while True:
            best = self._highest_priority_index(parent)
            if best == parent:
                return
            self._swap(parent, best)
            parent = best

    def __repr__(self) -> str:
        return f"Heap(size={len(self._entries)})"
