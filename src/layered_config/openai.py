"""OpenAI client settings on top of a ConfigurationStore.

Keys:
    OPENAI_API_KEY (environment) / openai.api.key (properties): API key
    openai.model.name: chat model name
    openai.temperature: sampling temperature, 0.7 when unset

Unlike the generic ``get_float``, a malformed ``openai.temperature`` is not
replaced by the default: ``get_temperature`` raises NumberFormatError.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional

from layered_config.conversions import parse_decimal
from layered_config.store import ConfigurationStore, get_configuration

API_KEY_ENV = "OPENAI_API_KEY"
API_KEY_PROPERTY = "openai.api.key"
MODEL_NAME_PROPERTY = "openai.model.name"
TEMPERATURE_PROPERTY = "openai.temperature"
DEFAULT_TEMPERATURE = 0.7


class OpenAIConfiguration:
    """Named OpenAI settings resolved through a wrapped store."""

    def __init__(self, store: ConfigurationStore) -> None:
        self._store = store

    @classmethod
    def from_file(cls, source: Path | str, **kwargs) -> "OpenAIConfiguration":
        """Wrap a new store loaded from ``source``; kwargs go to ConfigurationStore."""
        return cls(ConfigurationStore(source, **kwargs))

    @property
    def store(self) -> ConfigurationStore:
        return self._store

    def get_api_key(self) -> Optional[str]:
        """API key from OPENAI_API_KEY, else from openai.api.key in the properties.

        The environment is only consulted under OPENAI_API_KEY, never under
        the dotted property name.
        """
        key = self._store.read_environment(API_KEY_ENV)
        if key is None:
            key = self._store.get_table_value(API_KEY_PROPERTY)
        return key

    def get_model_name(self) -> Optional[str]:
        return self._store.get_string(MODEL_NAME_PROPERTY)

    def get_temperature(self) -> float:
        """Sampling temperature, DEFAULT_TEMPERATURE when not configured.

        Raises:
            NumberFormatError: If the configured value is not a decimal number
        """
        value = self._store.get_string(TEMPERATURE_PROPERTY)
        if value is None:
            return DEFAULT_TEMPERATURE
        return parse_decimal(value)

    def __repr__(self) -> str:
        return f"OpenAIConfiguration(store={self._store!r})"


_shared_openai: Optional[OpenAIConfiguration] = None
_shared_lock = threading.Lock()


def get_openai_configuration() -> OpenAIConfiguration:
    """Get the OpenAI view of the shared store, rebuilding it after a store reset."""
    global _shared_openai

    store = get_configuration()
    with _shared_lock:
        if _shared_openai is None or _shared_openai.store is not store:
            _shared_openai = OpenAIConfiguration(store)
        return _shared_openai


def reset_openai_configuration() -> None:
    """Drop the shared OpenAI view (for tests)."""
    global _shared_openai
    with _shared_lock:
        _shared_openai = None


__all__ = [
    "API_KEY_ENV",
    "API_KEY_PROPERTY",
    "MODEL_NAME_PROPERTY",
    "TEMPERATURE_PROPERTY",
    "DEFAULT_TEMPERATURE",
    "OpenAIConfiguration",
    "get_openai_configuration",
    "reset_openai_configuration",
]
