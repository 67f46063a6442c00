"""Environment variable access.

The configuration store never touches ``os.environ`` directly; it asks an
EnvironmentReader. Production code uses SystemEnvironmentReader, tests pass a
MappingEnvironmentReader to probe precedence without mutating the process
environment.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values


def is_blank(value: Optional[str]) -> bool:
    """True for None, the empty string, or whitespace only."""
    return value is None or not value.strip()


class EnvironmentReader(ABC):
    """Reads a single named environment variable."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the current value of ``key``, or None if unset."""


class SystemEnvironmentReader(EnvironmentReader):
    """Reads the live process environment on every call."""

    def get(self, key: str) -> Optional[str]:
        return os.environ.get(key)

    def __repr__(self) -> str:
        return "SystemEnvironmentReader()"


class MappingEnvironmentReader(EnvironmentReader):
    """Environment backed by an in-memory mapping.

    Keys held by the mapping win; anything else is delegated to ``fallback``
    when one is given, otherwise reported as unset.

    Example:
        env = MappingEnvironmentReader({"app.port": "9000"}, fallback=SystemEnvironmentReader())
        env.set("app.debug", "true")
        store = ConfigurationStore("application.properties", environment=env)
    """

    def __init__(
        self,
        values: Optional[Mapping[str, str]] = None,
        fallback: Optional[EnvironmentReader] = None,
    ) -> None:
        self._values: Dict[str, str] = dict(values or {})
        self._fallback = fallback

    @classmethod
    def from_env_file(
        cls,
        env_file: Path | str,
        fallback: Optional[EnvironmentReader] = None,
    ) -> "MappingEnvironmentReader":
        """Build a reader from a dotenv file.

        Keys declared without a value (``KEY`` on its own line) are skipped.
        A missing file yields an empty mapping.
        """
        env_path = Path(env_file)
        values: Dict[str, str] = {}
        if env_path.exists():
            values = {k: v for k, v in dotenv_values(env_path).items() if v is not None}
        return cls(values, fallback=fallback)

    def get(self, key: str) -> Optional[str]:
        if key in self._values:
            return self._values[key]
        if self._fallback is not None:
            return self._fallback.get(key)
        return None

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def unset(self, key: str) -> None:
        self._values.pop(key, None)

    def clear(self) -> None:
        self._values.clear()

    def __repr__(self) -> str:
        return f"MappingEnvironmentReader(keys={sorted(self._values)}, fallback={self._fallback!r})"


__all__ = [
    "EnvironmentReader",
    "SystemEnvironmentReader",
    "MappingEnvironmentReader",
    "is_blank",
]
