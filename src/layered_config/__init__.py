"""layered-config - properties files with environment variable overrides.

This package provides:
- store: ConfigurationStore with typed getters and a shared process-wide instance
- environment: pluggable environment readers (live process env, in-memory, dotenv file)
- openai: OpenAI client settings (API key, model name, temperature)
- logger: structured logging with JSON support
- exceptions: exception classes with structured error info
"""

__version__ = "1.0.0"

from layered_config.environment import (
    EnvironmentReader,
    MappingEnvironmentReader,
    SystemEnvironmentReader,
    is_blank,
)

from layered_config.exceptions import (
    ConfigError,
    NumberFormatError,
    SourceError,
    ValidationError,
)

from layered_config.logger import (
    DefaultLogger,
    Logger,
    StructuredLogger,
    create_logger,
    get_logger,
)

from layered_config.openai import (
    DEFAULT_TEMPERATURE,
    OpenAIConfiguration,
    get_openai_configuration,
    reset_openai_configuration,
)

from layered_config.store import (
    DEFAULT_SOURCE,
    ConfigurationStore,
    get_configuration,
    load_properties,
    reset_configuration,
)

__all__ = [
    "__version__",
    # Environment
    "EnvironmentReader",
    "SystemEnvironmentReader",
    "MappingEnvironmentReader",
    "is_blank",
    # Store
    "DEFAULT_SOURCE",
    "ConfigurationStore",
    "load_properties",
    "get_configuration",
    "reset_configuration",
    # OpenAI
    "DEFAULT_TEMPERATURE",
    "OpenAIConfiguration",
    "get_openai_configuration",
    "reset_openai_configuration",
    # Logger
    "Logger",
    "DefaultLogger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
    # Exceptions
    "ConfigError",
    "ValidationError",
    "SourceError",
    "NumberFormatError",
]
