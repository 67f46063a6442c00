"""Base exception classes for layered-config.

All layered-config exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery
"""

from typing import Any, Dict, Optional


class ConfigError(Exception):
    """Base exception for all layered-config errors.

    Attributes:
        code: Machine-readable error code (e.g., "INVALID_NUMBER")
        message: Human-readable error message
        details: Optional additional context for debugging/recovery
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code (e.g., "SOURCE_UNREADABLE")
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(ConfigError):
    """Base for all validation errors.

    Used when a configured value fails to convert to the requested type.
    """

    pass


class SourceError(ConfigError):
    """A properties source could not be located, read or parsed."""

    def __init__(self, source: str, reason: str, details: Optional[Dict[str, Any]] = None):
        merged = {"source": source}
        merged.update(details or {})
        super().__init__(
            code="SOURCE_UNREADABLE",
            message=f"Could not load {source}: {reason}",
            details=merged,
        )
        self.source = source


class NumberFormatError(ValidationError, ValueError):
    """A present value is not a valid numeric literal.

    Subclasses ValueError so callers that only know about the builtin
    numeric failure can still catch it.
    """

    def __init__(self, value: str, expected: str):
        super().__init__(
            code="INVALID_NUMBER",
            message=f"For input string: {value!r}",
            details={"value": value, "expected": expected},
        )
        self.value = value
        self.expected = expected
