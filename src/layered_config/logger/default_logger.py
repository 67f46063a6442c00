"""
Plain stream logger.

Writes one formatted line per message to a text stream (stderr by default).
Handy in tests, where a StringIO can stand in for the stream.
"""

import sys
import uuid
from datetime import datetime, timezone
from typing import Any, TextIO

from .interface import Logger


class DefaultLogger(Logger):
    """Stream logger with session tracking.

    Example:
        buffer = io.StringIO()
        logger = DefaultLogger(output=buffer, include_timestamp=False)
        store = ConfigurationStore("missing.properties", logger=logger)
        assert "[WARNING]" in buffer.getvalue()
    """

    def __init__(
        self,
        name: str = "layered-config",
        output: TextIO = sys.stderr,
        include_timestamp: bool = True,
    ):
        """Initialize the stream logger.

        Args:
            name: Logger name (included in output for identification)
            output: Output stream (default: stderr)
            include_timestamp: Whether to prefix lines with an ISO timestamp
        """
        self._name = name
        self._session_id = str(uuid.uuid4())
        self._output = output
        self._include_timestamp = include_timestamp

    def get_session_id(self) -> str:
        return self._session_id

    def _format_message(self, level: str, message: str, **kwargs: Any) -> str:
        parts = []
        if self._include_timestamp:
            parts.append(datetime.now(timezone.utc).isoformat())

        parts.append(f"[{level}]")
        parts.append(f"[{self._name}]")
        parts.append(f"[session:{self._session_id[:8]}]")
        parts.append(message)

        if kwargs:
            parts.append("(" + " ".join(f"{k}={v}" for k, v in kwargs.items()) + ")")

        return " ".join(parts)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        print(self._format_message(level, message, **kwargs), file=self._output, flush=True)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log("CRITICAL", message, **kwargs)
