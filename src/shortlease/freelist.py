"""Min-heap of vacant slot indices."""

import heapq
from collections.abc import Iterable


class FreeSlots:
    """
    Vacant slot indices, always handing out the lowest one first.

    Push and pop are O(log n). The caller pushes an index only when the slot
    goes from occupied to vacant, so each index is held at most once.
    """

    __slots__ = ("_heap",)

    def __init__(self, indices: Iterable[int] = ()) -> None:
        self._heap: list[int] = list(indices)
        heapq.heapify(self._heap)

    def push(self, index: int) -> None:
        """Mark ``index`` as vacant."""
        heapq.heappush(self._heap, index)

    def pop(self) -> int | None:
        """Remove and return the lowest vacant index, or None if there is none."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)

    def peek(self) -> int | None:
        """Return the lowest vacant index without removing it."""
        return self._heap[0] if self._heap else None

    def copy(self) -> "FreeSlots":
        clone = FreeSlots()
        clone._heap = list(self._heap)
        return clone

    def __contains__(self, index: object) -> bool:
        return index in self._heap

    def __len__(self) -> int:
        """Return the number of vacant indices."""
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
