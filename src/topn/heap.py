"""Array-backed binary min-heap keyed on an integer score."""

from __future__ import annotations

from typing import Any, Generic, Iterator, NamedTuple, TypeVar

T = TypeVar("T")


class HeapEntry(NamedTuple):
    score: int
    item: Any


class MinHeap(Generic[T]):
    """Min-priority-queue of (score, item) entries.

    The heap does not cap its own size; callers that need a bounded
    queue check ``size()`` before inserting. Comparisons use the score
    only, so equal-score entries keep no particular order.
    """

    def __init__(self) -> None:
        self._heap: list[HeapEntry] = []

    @staticmethod
    def _parent(i: int) -> int:
        return (i - 1) // 2

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def insert(self, score: int, item: T) -> None:
        """Add an entry and bubble it up while its parent scores strictly higher."""
        self._heap.append(HeapEntry(score, item))
        self._bubble_up(len(self._heap) - 1)

    def _bubble_up(self, i: int) -> None:
        heap = self._heap
        while i > 0 and heap[self._parent(i)].score > heap[i].score:
            parent = self._parent(i)
            self._swap(i, parent)
            i = parent

    def extract_min(self) -> HeapEntry | None:
        """Remove and return the lowest-scoring entry, or None when empty."""
        if not self._heap:
            return None
        smallest = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._bubble_down(0)
        return smallest

    def _bubble_down(self, i: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left, right = 2 * i + 1, 2 * i + 2
            smallest = i
            if left < size and heap[left].score < heap[smallest].score:
                smallest = left
            if right < size and heap[right].score < heap[smallest].score:
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    def peek(self) -> HeapEntry:
        """Return the lowest-scoring entry without removing it."""
        if not self._heap:
            raise IndexError("peek from an empty heap")
        return self._heap[0]

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[HeapEntry]:
        return iter(self._heap)
