"""Exception classes for shortlease."""


class ShortLeaseError(Exception):
    """Base exception for all shortlease errors."""


class VacantSlotError(ShortLeaseError, KeyError):
    """Raised by strict access (``table[h]``, ``del table[h]``) on a vacant or out-of-range handle."""


class TableModifiedError(ShortLeaseError, RuntimeError):
    """Raised when an iterator is advanced after slots were occupied or vacated."""
