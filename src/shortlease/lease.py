"""Occupied slot record."""

from typing import Generic, TypeVar

T = TypeVar("T")


class Lease(Generic[T]):
    """
    An occupied slot: the stored value and the clock reading taken at insert.

    ``value`` may be reassigned in place; ``inserted_at`` is fixed for the
    life of the lease.
    """

    __slots__ = ("value", "_inserted_at")

    def __init__(self, value: T, inserted_at: float) -> None:
        self.value = value
        self._inserted_at = inserted_at

    @property
    def inserted_at(self) -> float:
        """Clock reading recorded when the value was inserted."""
        return self._inserted_at

    def age(self, now: float) -> float:
        """Seconds elapsed between insertion and ``now``."""
        return now - self._inserted_at

    def is_expired(self, now: float, max_age: float) -> bool:
        """Check if the lease has outlived ``max_age``."""
        return self.age(now) > max_age

    def __repr__(self) -> str:
        return f"Lease(value={self.value!r}, inserted_at={self._inserted_at!r})"
