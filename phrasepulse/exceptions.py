"""Custom exceptions for PhrasePulse."""

from typing import Any


class PulseError(Exception):
    """Base exception for all PhrasePulse errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize PhrasePulse error.

        Args:
            message: Error message
            details: Additional error details

        """
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(PulseError):
    """Raised when configuration or the theme file is invalid."""


class InputError(PulseError):
    """Raised when the text to search cannot be obtained."""


class ValidationError(PulseError):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, message: str) -> None:
        super().__init__(message, {"field": field, "value": value})
        self.field = field
        self.value = value


class InvalidPatternError(ValidationError):
    """Raised when a search pattern is empty or not a valid regex."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__("pattern", pattern, f"Invalid pattern: {reason}")
        self.pattern = pattern
        self.reason = reason


class RegexTimeoutError(PulseError):
    """Raised when regex matching exceeds its time budget."""

    def __init__(self, pattern: str, timeout_seconds: float) -> None:
        message = f"Regex matching timed out after {timeout_seconds} seconds"
        super().__init__(message, {"pattern": pattern, "timeout_seconds": timeout_seconds})
        self.pattern = pattern
        self.timeout_seconds = timeout_seconds


class InvalidRangeError(PulseError):
    """Raised when a match range falls outside the text it refers to."""

    def __init__(self, start: int, end: int, length: int) -> None:
        super().__init__(
            f"Range [{start}, {end}) is outside text of length {length}",
            {"start": start, "end": end, "length": length},
        )
        self.start = start
        self.end = end
        self.length = length
