"""
Array-backed binary max-heap.

The heap is a plain Python list read as a complete binary tree:

    index i  →  parent (i - 1) // 2,  left child 2i + 1,  right child 2i + 2

Invariant: every entry's priority is >= the priority of both its children,
so the root (index 0) always holds the maximum.

- enqueue: append + sift-up   → O(log n)
- dequeue: pop root + sift-down → O(log n)
- peek:    read index 0       → O(1)

Why not heapq? heapq is a min-heap that compares whole tuples, which would
need negated keys plus a counter tiebreaker (see the SJF/priority approach).
Here the tie behavior on equal priorities is part of the contract: the left
child wins unless the right one is strictly larger, so the traversal is
written out by hand.

The heap knows nothing about tasks. Elements are opaque.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class HeapEntry:
    element: Any
    priority: float


class BinaryHeap:

    def __init__(self):
        self._heap: list[HeapEntry] = []

    # ── Public API ──────────────────────────────────────────────

    def is_empty(self) -> bool:
        return len(self._heap) == 0

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def peek(self) -> Optional[HeapEntry]:
        """Return the max entry without removing it, or None if empty."""
        return self._heap[0] if self._heap else None

    def enqueue(self, element: Any, priority: float) -> None:
        self._heap.append(HeapEntry(element, priority))
        self._sift_up(len(self._heap) - 1)

    def dequeue(self) -> Optional[HeapEntry]:
        """
        Remove and return the max entry, or None if empty.

        The last entry is moved to the root and pushed down until the
        invariant holds again.
        """
        if not self._heap:
            return None

        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    # ── Index arithmetic ────────────────────────────────────────

    @staticmethod
    def _parent(index: int) -> int:
        return (index - 1) // 2

    @staticmethod
    def _left(index: int) -> int:
        return 2 * index + 1

    @staticmethod
    def _right(index: int) -> int:
        return 2 * index + 2

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    # ── Invariant restoration ───────────────────────────────────

    def _sift_up(self, index: int) -> None:
        # strictly greater: equal priorities stay below their parent
        while index > 0:
            parent = self._parent(index)
            if self._heap[index].priority > self._heap[parent].priority:
                self._swap(index, parent)
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        size = len(self._heap)
        while self._left(index) < size:
            larger = self._left(index)
            right = self._right(index)
            if right < size and self._heap[right].priority > self._heap[larger].priority:
                larger = right

            if self._heap[index].priority >= self._heap[larger].priority:
                break

            self._swap(index, larger)
            index = larger
