"""Common exceptions for layered-config.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Usage:
    from layered_config.exceptions import (
        ConfigError,
        ValidationError,
        SourceError,
        NumberFormatError,
    )
"""

from layered_config.exceptions.base import (
    ConfigError,
    NumberFormatError,
    SourceError,
    ValidationError,
)

__all__ = [
    "ConfigError",
    "ValidationError",
    "SourceError",
    "NumberFormatError",
]
