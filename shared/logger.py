"""
Warden Structured Logger
=========================

:class:`WardenLogger` binds a component name and an operation scope to
every record it emits. Records go to a Rich handler on stderr and,
optionally, to a size-rotated file as plain text or JSON lines.

Password material must never reach a log sink. Callers log lengths,
labels and scores; as a backstop every handler carries a
:class:`RedactingFilter` that blanks structured fields whose names look
secret-bearing.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
    - OWASP Logging Cheat Sheet, "Data to exclude".
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAMESPACE = "warden"
REDACTED = "[redacted]"

# Structured-field names that are never written out.
SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "candidate", "plaintext",
})

_STDLIB_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel"})

_STDERR_THEME = Theme({
    "log.level.debug": "dim cyan",
    "log.level.info": "bright_blue",
    "log.level.warning": "yellow",
    "log.level.error": "bold red",
    "log.level.critical": "bold white on red",
})

_TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(operation)s] %(message)s"


# ===================================================================== #
#  Filters / Formatters
# ===================================================================== #


class RedactingFilter(logging.Filter):
    """Blank structured fields named like secrets and fill scope defaults."""

    def filter(self, record: logging.LogRecord) -> bool:
        fields = getattr(record, "fields", None)
        if fields:
            record.fields = {
                key: REDACTED if key.lower() in SENSITIVE_FIELDS else value
                for key, value in fields.items()
            }
        if getattr(record, "operation", None) is None:
            record.operation = "-"
        return True


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``timestamp``, ``level``, ``logger``, ``message``,
    ``component``, ``operation`` (omitted outside a scope), ``fields``
    (structured keyword arguments) and ``exception`` (formatted
    traceback, when present).
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "component": getattr(record, "component", None),
        }
        operation = getattr(record, "operation", "-")
        if operation != "-":
            payload["operation"] = operation
        fields = getattr(record, "fields", None)
        if fields:
            payload["fields"] = fields
        if record.exc_info and record.exc_info[1] is not None:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _stderr_handler(level: int) -> logging.Handler:
    return RichHandler(
        console=Console(theme=_STDERR_THEME, stderr=True),
        level=level,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )


def _file_handler(path: Path, level: int, json_lines: bool, max_bytes: int, backups: int) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(JsonLineFormatter() if json_lines else logging.Formatter(_TEXT_FORMAT))
    return handler


# ===================================================================== #
#  WardenLogger
# ===================================================================== #


class _Stopwatch:
    """Elapsed wall time of a :meth:`WardenLogger.timed` block."""

    def __init__(self) -> None:
        self._start = time.perf_counter()
        self._stop: float | None = None

    @property
    def elapsed(self) -> float:
        end = self._stop if self._stop is not None else time.perf_counter()
        return end - self._start

    def stop(self) -> None:
        self._stop = time.perf_counter()


class WardenLogger:
    """Component-scoped structured logger.

    Keyword arguments other than the stdlib ones become structured
    ``fields`` on the record::

        log = WardenLogger("engine", log_file="warden.log", json_logs=True)
        with log.operation("assess_risk"):
            log.info("Risk computed", score=42)

    Operations nest; the innermost name is the one recorded.

    Args:
        component: Name appended to the ``warden.`` logger namespace.
        log_level: Minimum level name; unknown names fall back to INFO.
        log_file: Rotating log file path; ``None`` disables file output.
        json_logs: Write JSON lines instead of plain text to the file.
        max_bytes: Rotation size of the log file.
        backup_count: Rotated files kept.
        console_output: Attach the Rich stderr handler.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
        console_output: bool = True,
    ) -> None:
        self._component = component
        self._scopes: list[str] = []

        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO

        self._logger = logging.getLogger(f"{LOGGER_NAMESPACE}.{component}")
        self._logger.setLevel(level)
        self._logger.propagate = False
        for stale in list(self._logger.handlers):
            self._logger.removeHandler(stale)
            stale.close()

        handlers: list[logging.Handler] = []
        if console_output:
            handlers.append(_stderr_handler(level))
        if log_file:
            handlers.append(_file_handler(Path(log_file), level, json_logs, max_bytes, backup_count))
        for handler in handlers:
            handler.addFilter(RedactingFilter())
            self._logger.addHandler(handler)

    @classmethod
    def from_config(cls, component: str, config: Any) -> WardenLogger:
        """Logger configured from the ``[global]`` section of a WardenConfig."""
        settings = config.global_settings
        return cls(
            component,
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
        )

    # ------------------------------------------------------------------ #
    #  Scopes
    # ------------------------------------------------------------------ #

    @contextmanager
    def operation(self, name: str) -> Iterator[WardenLogger]:
        """Tag records emitted inside the block with ``operation=name``."""
        self._scopes.append(name)
        try:
            yield self
        finally:
            self._scopes.pop()

    @contextmanager
    def timed(self, label: str) -> Iterator[_Stopwatch]:
        """Log *label* with its duration at DEBUG when the block exits."""
        watch = _Stopwatch()
        try:
            yield watch
        finally:
            watch.stop()
            self.debug("%s took %.3f ms", label, watch.elapsed * 1000.0)

    # ------------------------------------------------------------------ #
    #  Emitters
    # ------------------------------------------------------------------ #

    def _log(self, level: int, msg: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        stdlib = {k: kwargs.pop(k) for k in list(kwargs) if k in _STDLIB_KWARGS}
        extra = {
            "component": self._component,
            "operation": self._scopes[-1] if self._scopes else None,
            "fields": kwargs,
        }
        stdlib.setdefault("stacklevel", 3)
        self._logger.log(level, msg, *args, extra=extra, **stdlib)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, args, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, args, kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, args, kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """ERROR record carrying the active exception's traceback."""
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, msg, args, kwargs)

    # ------------------------------------------------------------------ #
    #  Accessors
    # ------------------------------------------------------------------ #

    @property
    def component(self) -> str:
        return self._component

    @property
    def underlying(self) -> logging.Logger:
        return self._logger
