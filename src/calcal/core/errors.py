class CalendarError(Exception):
    """Base error."""

class OutOfDomainError(CalendarError, ValueError):
    """Raised when an absolute date precedes a calendar's epoch (Islamic, French)."""

class NoSolutionError(CalendarError, ValueError):
    """Raised when no absolute date matches the requested combination."""

class UnknownCalendarError(CalendarError, KeyError):
    """Raised when a calendar name is not in the registry."""

class NotInvertibleError(CalendarError, TypeError):
    """Raised when asking a cyclic calendar (haab, tzolkin) for an absolute date."""

class RecordError(CalendarError, ValueError):
    """Raised when a generic date record cannot be decoded."""
