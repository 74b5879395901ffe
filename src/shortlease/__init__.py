"""shortlease - Slot table for short-lived values with recycled handles and age eviction."""

from loguru import logger

from shortlease.core import LeaseTable
from shortlease.errors import ShortLeaseError, TableModifiedError, VacantSlotError
from shortlease.freelist import FreeSlots
from shortlease.lease import Lease
from shortlease.types import Clock, Handle, MaxAge

__version__ = "0.1.0"

__all__ = [
    "LeaseTable",
    "Lease",
    "FreeSlots",
    "ShortLeaseError",
    "VacantSlotError",
    "TableModifiedError",
    "Clock",
    "Handle",
    "MaxAge",
]

# Silent unless the application opts in with logger.enable("shortlease")
logger.disable("shortlease")
