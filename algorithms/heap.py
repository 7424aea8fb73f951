"""
heap.py — Min-Heap Priority Queue
==================================
Pure min-extractor over (key, priority) pairs, backed by heapq.

No decrease-key: callers push a fresh entry when a priority improves and
skip the stale one when it surfaces (lazy deletion).  Each entry carries an
insertion counter so equal priorities never fall through to comparing keys.
"""

import heapq
import itertools
from typing import Any, List, NamedTuple, Optional, Tuple


class HeapItem(NamedTuple):
    key:      Any
    priority: float


class MinHeap:
    def __init__(self):
        self._data:    List[Tuple[float, int, HeapItem]] = []
        self._counter = itertools.count()

    def push(self, item: HeapItem) -> None:
        heapq.heappush(self._data, (item.priority, next(self._counter), item))

    def pop(self) -> Optional[HeapItem]:
        """Remove and return the minimum-priority item, or None when empty."""
        if not self._data:
            return None
        return heapq.heappop(self._data)[2]

    def peek(self) -> Optional[HeapItem]:
        return self._data[0][2] if self._data else None

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)
