"""Configuration store: environment overrides layered over a properties file.

Resolution for every key is:

1. the environment variable of the same name, unless unset or blank
2. the value loaded from the properties source
3. the caller's default

The properties source is read exactly once, when the store is built. A
source that cannot be read leaves the store with an empty table and a
logged warning; construction never fails because of it.

Example:
    from layered_config import ConfigurationStore, get_configuration

    store = ConfigurationStore("service.properties")
    port = store.get_int("server.port", 8080)

    # Process-wide instance backed by application.properties
    debug = get_configuration().get_bool("app.debug", False)
"""

from __future__ import annotations

import threading
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from jproperties import ParseError, Properties

from layered_config.conversions import parse_bool, parse_decimal, parse_int
from layered_config.environment import EnvironmentReader, SystemEnvironmentReader, is_blank
from layered_config.exceptions import NumberFormatError, SourceError
from layered_config.logger import Logger, create_logger

DEFAULT_SOURCE = "application.properties"
DEFAULT_ENCODING = "iso-8859-1"

# Shared by every store built without an injected logger
_store_logger: Optional[Logger] = None


def _default_logger() -> Logger:
    global _store_logger
    if _store_logger is None:
        _store_logger = create_logger()
    return _store_logger


def load_properties(
    source: Path | str,
    resource_package: Optional[str] = None,
    encoding: str = DEFAULT_ENCODING,
) -> Dict[str, str]:
    """Parse a Java-style properties source into a flat dict.

    Args:
        source: File path, or resource name when ``resource_package`` is set
        resource_package: Package whose bundled resources hold ``source``
        encoding: Character encoding of the source

    Raises:
        SourceError: If the source is missing, unreadable or unparseable
    """
    props = Properties()
    try:
        if resource_package:
            resource = resources.files(resource_package).joinpath(str(source))
            with resource.open("rb") as stream:
                props.load(stream, encoding)
        else:
            with open(source, "rb") as stream:
                props.load(stream, encoding)
    except FileNotFoundError as exc:
        raise SourceError(str(source), "not found") from exc
    except ModuleNotFoundError as exc:
        raise SourceError(
            str(source), f"package {resource_package!r} not importable"
        ) from exc
    except (OSError, ParseError, UnicodeDecodeError) as exc:
        raise SourceError(str(source), str(exc), {"error": type(exc).__name__}) from exc

    return {key: entry.data for key, entry in props.items()}


class ConfigurationStore:
    """Typed configuration lookups with environment precedence.

    Args:
        source: Properties file to load (default: application.properties)
        environment: Environment reader (default: the live process environment)
        resource_package: Resolve ``source`` inside this package's bundled
            resources instead of the filesystem
        encoding: Character encoding of the source
        logger: Logger for load diagnostics
        table: Use these properties instead of reading ``source``
    """

    def __init__(
        self,
        source: Path | str = DEFAULT_SOURCE,
        environment: Optional[EnvironmentReader] = None,
        resource_package: Optional[str] = None,
        encoding: str = DEFAULT_ENCODING,
        logger: Optional[Logger] = None,
        table: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._source = str(source)
        self._environment = environment if environment is not None else SystemEnvironmentReader()
        self.logger = logger or _default_logger()

        if table is not None:
            self._table: Mapping[str, str] = MappingProxyType(dict(table))
            return

        try:
            table = load_properties(source, resource_package=resource_package, encoding=encoding)
        except SourceError as exc:
            self.logger.warning(exc.message, **exc.details)
            table = {}
        else:
            self.logger.debug(
                "Loaded properties source",
                source=self._source,
                entries=len(table),
            )

        self._table = MappingProxyType(table)

    @classmethod
    def from_file(cls, source: Path | str, **kwargs) -> "ConfigurationStore":
        """Create a store for a specific properties file."""
        return cls(source, **kwargs)

    @classmethod
    def from_mapping(
        cls,
        values: Mapping[str, str],
        environment: Optional[EnvironmentReader] = None,
        source: str = "<mapping>",
    ) -> "ConfigurationStore":
        """Create a store over an in-memory table without reading any source."""
        return cls(source, environment=environment, table=values)

    @property
    def source(self) -> str:
        return self._source

    @property
    def environment(self) -> EnvironmentReader:
        return self._environment

    @property
    def table(self) -> Mapping[str, str]:
        """Read-only view of the loaded properties."""
        return self._table

    def read_environment(self, key: str) -> Optional[str]:
        """Environment value for ``key``, or None when unset or blank."""
        value = self._environment.get(key)
        return None if is_blank(value) else value

    def get_table_value(self, key: str) -> Optional[str]:
        """Value loaded from the properties source, ignoring the environment."""
        return self._table.get(key)

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Resolve ``key`` through environment, then table, then ``default``."""
        value = self.read_environment(key)
        if value is not None:
            return value
        return self._table.get(key, default)

    def get_int(self, key: str, default: int) -> int:
        """Resolve ``key`` as an integer; absent or malformed gives ``default``."""
        value = self.get_string(key)
        if value is None:
            return default
        try:
            return parse_int(value)
        except NumberFormatError:
            return default

    def get_float(self, key: str, default: float) -> float:
        """Resolve ``key`` as a decimal; absent or malformed gives ``default``."""
        value = self.get_string(key)
        if value is None:
            return default
        try:
            return parse_decimal(value)
        except NumberFormatError:
            return default

    def get_bool(self, key: str, default: bool) -> bool:
        """Resolve ``key`` as a boolean.

        Only absence yields ``default``. Any present value is True when it
        equals "true" ignoring case and False otherwise, so "yes", "1" and
        garbage all read as False.
        """
        value = self.get_string(key)
        if value is None:
            return default
        return parse_bool(value)

    def has_key(self, key: str) -> bool:
        """True if the environment or the table supplies ``key``."""
        return self.read_environment(key) is not None or key in self._table

    def __repr__(self) -> str:
        return (
            f"ConfigurationStore(source={self._source!r}, entries={len(self._table)}, "
            f"environment={self._environment!r})"
        )


# Process-wide store, created on first request
_shared_store: Optional[ConfigurationStore] = None
_shared_lock = threading.Lock()


def get_configuration(resource_package: Optional[str] = None) -> ConfigurationStore:
    """Get or create the shared store backed by ``application.properties``.

    Args:
        resource_package: Load the default source from this package's bundled
            resources instead of the working directory. Only applies when the
            shared store is created; later calls return the existing store.

    Returns:
        The process-wide ConfigurationStore
    """
    global _shared_store

    with _shared_lock:
        if _shared_store is None:
            _shared_store = ConfigurationStore(DEFAULT_SOURCE, resource_package=resource_package)
        return _shared_store


def reset_configuration() -> None:
    """Drop the shared store so the next access builds a fresh one (for tests)."""
    global _shared_store
    with _shared_lock:
        _shared_store = None


__all__ = [
    "DEFAULT_SOURCE",
    "DEFAULT_ENCODING",
    "ConfigurationStore",
    "load_properties",
    "get_configuration",
    "reset_configuration",
]
