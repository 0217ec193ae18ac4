class CalsysError(Exception):
    """Base error."""

class InvalidDateError(CalsysError, ValueError):
    """Raised when civil date fields are outside a calendar's valid range."""

class OutOfRangeError(CalsysError, ValueError):
    """Raised when a Julian Day Number is outside a calendar's convertible range."""

class CalendarUnavailableError(CalsysError, KeyError):
    """Raised when a calendar name is not registered."""

class DependencyMissingError(CalsysError, RuntimeError):
    """Raised when an optional dependency (numpy, matplotlib) is not installed."""
