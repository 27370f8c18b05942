class CaljalError(Exception):
    """Base error."""

class InvalidDateError(CaljalError, ValueError):
    """Raised when a year/month/day triple is not a valid calendar date."""

class ClockError(CaljalError):
    """Raised when a clock cannot supply the current date."""
