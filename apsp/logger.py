"""Lightweight logging helpers for optional structured output.

Algorithms log through the small :class:`Logger` protocol so that the
default :class:`NoopLogger` costs nothing. :class:`StdLogger` writes one line
per event, either as ``key=value`` pairs or as a JSON object.
"""

from __future__ import annotations

import json
import math
import sys
from typing import Any, Dict, Protocol

from .exceptions import ConfigError


class Logger(Protocol):
    """Protocol for minimal logger implementations."""

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO``-level event."""
        ...

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG``-level event."""
        ...


class NoopLogger:
    """Logger that discards all events."""

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return


def _plain(value: Any) -> Any:
    """Return ``value`` with infinite distances replaced by ``"inf"``.

    JSON has no literal for infinity, and unreachable vertices carry
    ``math.inf`` as their distance.
    """
    if isinstance(value, float) and math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if isinstance(value, dict):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_plain(v) for v in value]
    return value


class StdLogger:
    """Minimal logger with optional JSON output.

    Args:
        level: Lowest level written: ``"debug"``, ``"info"`` or ``"warning"``.
        json_fmt: Write JSON objects instead of ``key=value`` pairs.
        stream: Output stream, ``sys.stderr`` by default.
    """

    _levels: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: Any | None = None,
    ) -> None:
        if level not in self._levels:
            raise ConfigError(f"unknown log level {level!r}")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr

    def enabled(self, level: str) -> bool:
        """Return ``True`` if events at ``level`` are written."""
        return self._levels[level] >= self._levels[self.level]

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit a log ``event`` at ``level`` with additional ``fields``."""
        if not self.enabled(level):
            return
        if self.json_fmt:
            obj: Dict[str, Any] = {"level": level, "event": event}
            obj.update(_plain(fields))
            line = json.dumps(obj, default=str, allow_nan=False)
        else:
            kv = " ".join(f"{k}={_plain(v)}" for k, v in fields.items())
            line = f"{level} {event} {kv}".rstrip()
        self.stream.write(line + "\n")

    def info(self, event: str, **fields: Any) -> None:
        self.log("info", event, **fields)

    def debug(self, event: str, **fields: Any) -> None:
        self.log("debug", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self.log("warning", event, **fields)


__all__ = ["Logger", "NoopLogger", "StdLogger"]
