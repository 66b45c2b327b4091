"""
Priority queue used by the JobScheduler.

Entries with the lowest priority NUMBER come out first (1 = highest priority).
Entries with equal priority come out in the order they were enqueued (FIFO).

Data structure: a Python list kept sorted by priority
- enqueue: bisect_right to find the slot, then list.insert → O(n)
- dequeue: pop from the front                               → O(n)
- peek:    read index 0                                     → O(1)

Why a sorted list instead of heapq?
- The whole pending set has to be listed in order (drain_view), which a heap
  can't do without sorting a copy every time.
- bisect_right returns the index just AFTER every entry with the same
  priority, which is exactly "insert before the first entry whose priority is
  strictly greater". That placement gives FIFO ties for free, without the
  (priority, counter, item) tuple trick a heap needs.

The O(n) insert is fine for interactive job lists (tens to hundreds of jobs).
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class QueueEntry(Generic[T]):
    """A payload plus the priority it was enqueued with. Immutable."""
    payload: T
    priority: float


class PriorityQueue(Generic[T]):

    def __init__(self):
        self._entries: list[QueueEntry[T]] = []

    def enqueue(self, payload: T, priority: float) -> QueueEntry[T]:
        entry = QueueEntry(payload=payload, priority=priority)
        index = bisect_right(self._entries, priority, key=lambda e: e.priority)
        self._entries.insert(index, entry)
        return entry

    def dequeue(self) -> Optional[QueueEntry[T]]:
        """Remove and return the front entry, or None if the queue is empty."""
        return self._entries.pop(0) if self._entries else None

    def peek(self) -> Optional[QueueEntry[T]]:
        """View the front entry without removing it. Returns None if empty."""
        return self._entries[0] if self._entries else None

    def is_empty(self) -> bool:
        return not self._entries

    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def drain_view(self) -> tuple[QueueEntry[T], ...]:
        """
        Snapshot of every entry in dequeue order, without removing anything.

        Returned as a tuple of frozen entries, so callers can't reorder or
        replace what the queue holds.
        """
        return tuple(self._entries)

    def clear(self) -> None:
        self._entries.clear()
