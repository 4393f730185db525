from __future__ import annotations
import heapq
from typing import Callable, Generic, Iterable, List, Optional, Tuple, TypeVar
from .datatypes import ScoreMap

T = TypeVar("T")

class _Entry(Generic[T]):
    __slots__ = ("item", "less")

    def __init__(self, item: T, less: Callable[[T, T], bool]):
        self.item = item
        self.less = less

    def __lt__(self, other: "_Entry[T]") -> bool:
        return self.less(self.item, other.item)

class BoundedMaxHeap(Generic[T]):
    """
    Keep the ``capacity`` largest items seen, as ordered by ``less``.

    Internally a min-heap whose root is the weakest kept item; a new item
    replaces the root only when it ranks strictly higher.
    """

    def __init__(self, capacity: int, less: Callable[[T, T], bool]):
        self.capacity = max(0, capacity)
        self.less = less
        self._heap: List[_Entry[T]] = []

    def add(self, item: T) -> bool:
        if self.capacity == 0:
            return False
        entry = _Entry(item, self.less)
        if len(self._heap) < self.capacity:
            heapq.heappush(self._heap, entry)
            return True
        if self._heap[0] < entry:
            heapq.heapreplace(self._heap, entry)
            return True
        return False

    def add_all(self, items: Iterable[T]) -> "BoundedMaxHeap[T]":
        for item in items:
            self.add(item)
        return self

    def to_list(self) -> List[T]:
        # largest first
        return [e.item for e in sorted(self._heap, reverse=True)]

    def __len__(self) -> int:
        return len(self._heap)

def ranks_below(a: Tuple[str, float], b: Tuple[str, float]) -> bool:
    # lower score ranks below; on equal scores the lexically later word does
    if a[1] != b[1]:
        return a[1] < b[1]
    return a[0] > b[0]

def top_k(scores: ScoreMap, k: Optional[int]) -> List[Tuple[str, float]]:
    """Return the ``k`` best (word, score) pairs, best first. ``None`` means all."""
    if k is None:
        k = len(scores)
    heap: BoundedMaxHeap[Tuple[str, float]] = BoundedMaxHeap(k, ranks_below)
    return heap.add_all(scores.items()).to_list()
