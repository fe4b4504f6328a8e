"""Bounded mini-statement of an account's most recent transactions."""

from typing import Iterator, List


class MiniStatement:
    """Fixed-capacity ring of transactions, oldest evicted first.

    Entries are kept in insertion order. Once the ring is full each append
    overwrites the oldest slot and advances the start index, so appends are
    O(1) regardless of capacity.

    Args:
        capacity: Maximum number of entries retained (must be at least 1).
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"Statement capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._slots: list = [None] * capacity
        self._start = 0
        self._size = 0

    def append(self, entry) -> None:
        """Add an entry at the newest end, evicting the oldest when full."""
        if self._size < self.capacity:
            self._slots[(self._start + self._size) % self.capacity] = entry
            self._size += 1
        else:
            self._slots[self._start] = entry
            self._start = (self._start + 1) % self.capacity

    def snapshot(self) -> List:
        """Return a copy of the retained entries, oldest first."""
        return [
            self._slots[(self._start + i) % self.capacity] for i in range(self._size)
        ]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator:
        return iter(self.snapshot())
