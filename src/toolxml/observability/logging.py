"""Structured logging for conversions.

Context-aware key=value logging with immutable bound loggers:
- Human-readable console output for development, JSON lines for production
- Scoped context via log_context()
- Configuration from settings (TOOLXML_LOG_LEVEL / TOOLXML_LOG_FORMAT)

Quick Start:
    >>> from toolxml.observability import configure_logging, get_logger
    >>> configure_logging(format="console", level="DEBUG")
    >>> log = get_logger("toolxml.converter")
    >>> log.debug("conversion failed", code="PARSE_ERROR")
"""

from __future__ import annotations

import logging
import sys
import time
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Protocol, TextIO, runtime_checkable

import orjson

if TYPE_CHECKING:
    from types import TracebackType

    from toolxml.foundation.config import ToolxmlSettings

JsonDict = dict[str, Any]

# Scoped context, merged into every entry logged inside log_context()
_log_context: ContextVar[JsonDict] = ContextVar("toolxml_log_context", default={})


# ─────────────────────────────────────────────────────────────────────────────
# Core Logger
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class LogEntry:
    """Log entry with all merged context."""

    timestamp: float
    level: str
    event: str
    context: JsonDict

    @property
    def ts_iso(self) -> str:
        return datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()

    @property
    def ts_human(self) -> str:
        """Human-readable timestamp (HH:MM:SS.mmm)."""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]


@dataclass(slots=True)
class BoundLogger:
    """Structured logger with bound context. Immutable - bind() returns a new logger.

    Example:
        >>> log = BoundLogger(context={"logger": "toolxml.batch"})
        >>> log.bind(total=3).debug("batch converted", failed=1)
        # => 10:30:45.120 [debug] batch converted failed=1 logger=toolxml.batch total=3
    """

    context: JsonDict = field(default_factory=dict)
    _renderer: LogRenderer | None = None

    def bind(self, **kw: Any) -> BoundLogger:
        """Create new logger with additional bound context."""
        return BoundLogger(context={**self.context, **kw}, _renderer=self._renderer)

    def _log(self, level: int, event: str, **kw: Any) -> None:
        if level < _config.level:
            return
        merged = {**_log_context.get(), **self.context, **kw}
        (self._renderer or _config.renderer).render(LogEntry(time.time(), logging.getLevelName(level).lower(), event, merged))

    def debug(self, event: str, **kw: Any) -> None: self._log(logging.DEBUG, event, **kw)
    def info(self, event: str, **kw: Any) -> None: self._log(logging.INFO, event, **kw)
    def warning(self, event: str, **kw: Any) -> None: self._log(logging.WARNING, event, **kw)
    def error(self, event: str, **kw: Any) -> None: self._log(logging.ERROR, event, **kw)

    def exception(self, event: str, **kw: Any) -> None:
        """Log error with the current exception's traceback."""
        import traceback
        self._log(logging.ERROR, event, exc_info=traceback.format_exc(), **kw)


class log_context:
    """Context manager adding key-value pairs to all log entries within the scope."""

    __slots__ = ("_ctx", "_token")

    def __init__(self, **kw: Any) -> None:
        self._ctx: JsonDict = dict(kw)
        self._token: object | None = None

    def __enter__(self) -> log_context:
        self._token = _log_context.set({**_log_context.get(), **self._ctx})
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None,
                 exc_tb: TracebackType | None) -> None:
        if self._token is not None:
            _log_context.reset(self._token)  # type: ignore[arg-type]


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    """Protocol for log output renderers."""

    def render(self, entry: LogEntry) -> None: ...


def _format_value(v: Any) -> str:
    if isinstance(v, str):
        return repr(v) if (" " in v or "\n" in v) else v
    return str(v)


@dataclass(slots=True)
class ConsoleRenderer:
    """Human-readable output. Format: timestamp [level] event key=value ..."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    show_timestamp: bool = True

    def render(self, entry: LogEntry) -> None:
        parts = [entry.ts_human] if self.show_timestamp else []
        parts += [f"[{entry.level}]", entry.event]
        parts += [f"{k}={_format_value(v)}" for k, v in sorted(entry.context.items()) if k != "exc_info"]
        print(" ".join(parts), file=self.output)
        if "exc_info" in entry.context:
            print(entry.context["exc_info"], file=self.output)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines output for log aggregation."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        line = orjson.dumps(
            {"timestamp": entry.ts_iso, "level": entry.level, "event": entry.event, **entry.context},
            option=orjson.OPT_NON_STR_KEYS,
            default=str,
        )
        print(line.decode(), file=self.output)


@dataclass(slots=True)
class NoOpRenderer:
    """Silent renderer for testing."""

    def render(self, entry: LogEntry) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class _LogConfig:
    level: int = logging.WARNING
    renderer: LogRenderer = field(default_factory=ConsoleRenderer)


# Module-level so worker threads of the batch runner share it
_config = _LogConfig()


def configure_logging(
    format: str = "console",  # noqa: A002
    level: str = "WARNING",
    *,
    output: TextIO | None = None,
) -> LogRenderer:
    """Configure global structured logging. Format: "console" (human), "json" (machine), "none"."""
    match format:
        case "console": renderer: LogRenderer = ConsoleRenderer(output=output or sys.stderr)
        case "json": renderer = JsonRenderer(output=output or sys.stdout)
        case "none": renderer = NoOpRenderer()
        case _: raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")
    _config.level = logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)
    _config.renderer = renderer
    return renderer


def configure_from_settings(settings: ToolxmlSettings | None = None) -> LogRenderer:
    """Configure logging from TOOLXML_LOG_* settings. DEBUG level is forced when settings.debug is set."""
    if settings is None:
        from toolxml.foundation.config import get_settings
        settings = get_settings()
    level = "DEBUG" if settings.debug else settings.logging.level
    return configure_logging(settings.logging.format, level)


def get_logger(name: str | None = None, **initial_context: Any) -> BoundLogger:
    """Get a structured logger. Name is added to context as 'logger'."""
    return BoundLogger(context={**initial_context, **({"logger": name} if name else {})})
