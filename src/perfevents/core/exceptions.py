"""Exception types raised by perfevents."""


class PerfEventsError(Exception):
    """Base class for all perfevents errors."""


class AttributeValidationError(PerfEventsError, ValueError):
    """Raised when an attribute or counter list is malformed.

    Covers empty or non-string names, duplicate names within one list,
    values of the wrong kind, and non-finite counter values.
    """


class PayloadDecodeError(PerfEventsError, ValueError):
    """Raised when an encoded payload cannot be decoded."""
