"""Type definitions for shortlease."""

from collections.abc import Callable
from datetime import timedelta
from typing import TypeAlias

# Position of a slot in the table; recycled once the slot is vacated
Handle: TypeAlias = int

# Zero-argument time source returning seconds
Clock: TypeAlias = Callable[[], float]

# Eviction threshold, in seconds or as a timedelta
MaxAge: TypeAlias = float | timedelta
