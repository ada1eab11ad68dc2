"""Structured event logging for the generators.

Every generator takes an optional ``logger`` and reports through it with an
event name and keyword fields. :class:`NoopLogger` is used when none is given.
"""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional, Protocol, TextIO

from .exceptions import ConfigError

_LEVELS: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}


class Logger(Protocol):
    """Interface the generators log through."""

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO``-level event."""
        ...

    def warning(self, event: str, **fields: Any) -> None:
        """Emit a ``WARNING``-level event."""
        ...

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG``-level event."""
        ...

    def bind(self, **fields: Any) -> "Logger":
        """Return a logger that adds ``fields`` to every event."""
        ...


class NoopLogger:
    """Logger that discards all events."""

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def warning(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def bind(self, **fields: Any) -> "NoopLogger":
        return self


class StdLogger:
    """Write one line per event, as ``level event k=v ...`` or as JSON.

    Generators report one ``debug`` event when called and one ``info`` event
    describing what they produced, e.g.::

        info bipartite_graph size=6 black=3 white=3 added=4 strategy=enumerate

    Fields given to :meth:`bind` come before the per-event fields. When no
    ``stream`` is given, lines go to whatever ``sys.stderr`` is at write time,
    so pytest's ``capsys`` and redirected stderr both see them.
    """

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: Optional[TextIO] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        if level not in _LEVELS:
            raise ConfigError(f"unknown log level {level!r}, expected one of {sorted(_LEVELS)}")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream
        self.context: Dict[str, Any] = dict(context or {})

    def bind(self, **fields: Any) -> "StdLogger":
        """Return a logger sharing this one's settings with extra bound ``fields``."""
        merged = dict(self.context)
        merged.update(fields)
        return StdLogger(self.level, self.json_fmt, self.stream, merged)

    def enabled(self, level: str) -> bool:
        return _LEVELS[level] >= _LEVELS[self.level]

    def _format(self, level: str, event: str, fields: Dict[str, Any]) -> str:
        if self.json_fmt:
            obj: Dict[str, Any] = {"level": level, "event": event}
            obj.update(fields)
            return json.dumps(obj, default=str)
        parts = [level, event]
        parts.extend(f"{k}={v}" for k, v in fields.items())
        return " ".join(parts)

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit ``event`` at ``level`` if the threshold allows it."""
        if not self.enabled(level):
            return
        merged = dict(self.context)
        merged.update(fields)
        out = self.stream if self.stream is not None else sys.stderr
        out.write(self._format(level, event, merged) + "\n")

    def info(self, event: str, **fields: Any) -> None:
        self.log("info", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self.log("warning", event, **fields)

    def debug(self, event: str, **fields: Any) -> None:
        self.log("debug", event, **fields)


__all__ = ["Logger", "NoopLogger", "StdLogger"]
