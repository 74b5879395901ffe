"""Main LeaseTable implementation."""

import time
from collections.abc import Iterator
from datetime import timedelta
from typing import Generic, TypeVar

from loguru import logger

from shortlease.errors import TableModifiedError, VacantSlotError
from shortlease.freelist import FreeSlots
from shortlease.lease import Lease
from shortlease.types import Clock, Handle, MaxAge

T = TypeVar("T")
D = TypeVar("D")


class LeaseTable(Generic[T]):
    """
    Slot table for short-lived values addressed by recycled integer handles.

    Think of a hotel: checking in assigns the lowest free room number, and
    once the guest leaves that number can go to someone else. The slot list
    never shrinks, so lookup by handle is O(1), and vacated slots are reused
    before the table grows.

    Eviction is never scheduled by the table itself; callers invoke
    evict_older_than() at whatever cadence suits them. The table does no
    locking, so shared use needs a single external guard around every call.
    """

    def __init__(self, capacity: int | None = None, *, clock: Clock = time.monotonic) -> None:
        """
        Initialize the table.

        Args:
            capacity: Number of vacant slots to pre-size the table with.
            clock: Time source for insert timestamps and eviction ages,
                returning seconds. Defaults to time.monotonic.

        Raises:
            ValueError: If capacity is negative
        """
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        size = capacity or 0
        self._clock = clock
        self._slots: list[Lease[T] | None] = [None] * size
        self._free = FreeSlots(range(size))
        self._occupied = 0
        # Bumped whenever a slot is occupied or vacated; checked by live iterators
        self._version = 0

    @classmethod
    def with_capacity(cls, capacity: int, *, clock: Clock = time.monotonic) -> "LeaseTable[T]":
        """Create a table pre-sized with ``capacity`` vacant slots."""
        return cls(capacity, clock=clock)

    @property
    def capacity(self) -> int:
        """Number of slots, vacant or occupied."""
        return len(self._slots)

    def insert(self, value: T) -> Handle:
        """
        Store a value in the lowest vacant slot, growing the table if none is free.

        The returned handle is only meaningful until the value is removed or
        evicted; afterwards the same handle may be given to another value.

        Args:
            value: Value to store

        Returns:
            Handle of the slot now holding the value
        """
        lease = Lease(value, self._clock())
        handle = self._free.pop()
        if handle is None:
            handle = len(self._slots)
            self._slots.append(lease)
            logger.debug("Lease table grew to {} slots", len(self._slots))
        else:
            self._slots[handle] = lease
        self._occupied += 1
        self._version += 1
        return handle

    def get(self, handle: Handle) -> T | None:
        """Return the value at ``handle``, or None if the slot is vacant or out of range."""
        lease = self._lease_at(handle)
        return lease.value if lease is not None else None

    def lease(self, handle: Handle) -> Lease[T] | None:
        """Return the full lease record at ``handle``, or None if absent."""
        return self._lease_at(handle)

    def remove(self, handle: Handle) -> T | None:
        """
        Vacate the slot at ``handle`` and return its value.

        Returns None if the handle is out of range or already vacant. The
        handle becomes eligible for reuse by the next insert.
        """
        lease = self._vacate(handle)
        return lease.value if lease is not None else None

    def pop(self, handle: Handle, default: D | None = None) -> T | D | None:
        """Like remove(), but return ``default`` when the slot is absent."""
        lease = self._vacate(handle)
        return lease.value if lease is not None else default

    def evict_older_than(self, max_age: MaxAge) -> int:
        """
        Vacate every lease that has been held longer than ``max_age``.

        The clock is read once per call. Leases whose age is exactly
        ``max_age`` are kept. Slots are never reordered, so surviving leases
        keep their handles.

        Args:
            max_age: Maximum age in seconds, or a timedelta

        Returns:
            Number of leases vacated by this call

        Raises:
            ValueError: If max_age is negative
        """
        if isinstance(max_age, timedelta):
            max_age = max_age.total_seconds()
        if max_age < 0:
            raise ValueError(f"max_age must be >= 0, got {max_age}")

        now = self._clock()
        evicted = 0
        for handle, lease in enumerate(self._slots):
            if lease is not None and lease.is_expired(now, max_age):
                self._slots[handle] = None
                self._free.push(handle)
                evicted += 1

        if evicted:
            self._occupied -= evicted
            self._version += 1
            logger.debug(
                "Evicted {} leases older than {}s, {} still held",
                evicted,
                max_age,
                self._occupied,
            )
        return evicted

    def items(self, *, reverse: bool = False) -> Iterator[tuple[T, Handle]]:
        """
        Iterate over occupied slots as ``(value, handle)`` pairs.

        Handles ascend, or descend with ``reverse=True``. The iterator is
        single-use and raises TableModifiedError if a slot is occupied or
        vacated before it is exhausted.
        """
        return ((lease.value, handle) for lease, handle in self._walk(self._version, reverse))

    def entries(self, *, reverse: bool = False) -> Iterator[tuple[Lease[T], Handle]]:
        """
        Iterate over occupied slots as ``(lease, handle)`` pairs.

        Assigning ``lease.value`` replaces the stored value in place without
        touching its handle or insertion time, and does not invalidate the
        iterator.
        """
        return self._walk(self._version, reverse)

    def copy(self) -> "LeaseTable[T]":
        """Return a shallow copy with the same handles, timestamps and clock."""
        clone: LeaseTable[T] = type(self)(clock=self._clock)
        clone._slots = [
            Lease(lease.value, lease.inserted_at) if lease is not None else None
            for lease in self._slots
        ]
        clone._free = self._free.copy()
        clone._occupied = self._occupied
        return clone

    __copy__ = copy

    def __len__(self) -> int:
        """Return the number of occupied slots."""
        return self._occupied

    def __bool__(self) -> bool:
        return self._occupied > 0

    def __contains__(self, handle: object) -> bool:
        return isinstance(handle, int) and self._lease_at(handle) is not None

    def __iter__(self) -> Iterator[Handle]:
        """Iterate over occupied handles in ascending order."""
        return (handle for _, handle in self._walk(self._version, False))

    def __reversed__(self) -> Iterator[Handle]:
        return (handle for _, handle in self._walk(self._version, True))

    def __getitem__(self, handle: Handle) -> T:
        lease = self._lease_at(handle)
        if lease is None:
            raise VacantSlotError(handle)
        return lease.value

    def __delitem__(self, handle: Handle) -> None:
        if self._vacate(handle) is None:
            raise VacantSlotError(handle)

    def __repr__(self) -> str:
        body = ", ".join(f"{handle}: {value!r}" for value, handle in self.items())
        return f"{type(self).__name__}({{{body}}})"

    def _lease_at(self, handle: Handle) -> Lease[T] | None:
        if 0 <= handle < len(self._slots):
            return self._slots[handle]
        return None

    def _vacate(self, handle: Handle) -> Lease[T] | None:
        lease = self._lease_at(handle)
        if lease is None:
            return None
        self._slots[handle] = None
        self._free.push(handle)
        self._occupied -= 1
        self._version += 1
        return lease

    def _walk(self, version: int, reverse: bool) -> Iterator[tuple[Lease[T], Handle]]:
        """Yield occupied slots, failing if the table changed since ``version``."""
        size = len(self._slots)
        indices = range(size - 1, -1, -1) if reverse else range(size)
        for handle in indices:
            if self._version != version:
                raise TableModifiedError("LeaseTable changed during iteration")
            lease = self._slots[handle]
            if lease is not None:
                yield lease, handle
        if self._version != version:
            raise TableModifiedError("LeaseTable changed during iteration")
