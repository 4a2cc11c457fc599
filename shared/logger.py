"""
SecretForge Structured Logger
==============================

:class:`ForgeLogger` wraps a stdlib logger named ``secretforge.<component>``
with two sinks: a Rich console handler on stderr and, when a log file is
configured, a size-rotated file handler writing plain text or JSON lines.

Keyword arguments passed to the log methods become structured context.
Generated secrets must never reach a sink, so every handler carries a
:class:`_RedactionFilter` that blanks context entries named like a
secret (``secret``, ``password``, ``passphrase``, ``pin``), whatever
their case.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
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

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
    }
)

_REDACTED_KEYS: frozenset[str] = frozenset(
    {"secret", "password", "passphrase", "pin"}
)
_REDACTED = "<redacted>"

_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Keyword arguments the stdlib logging methods understand themselves
_LOGGING_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel", "extra"})


# ========================== Filters / Formatters ===========================


class _RedactionFilter(logging.Filter):
    """Replace secret-bearing context values before any handler formats them."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = getattr(record, "forge_context", None)
        if context:
            record.forge_context = {
                key: _REDACTED if key.lower() in _REDACTED_KEYS else value
                for key, value in context.items()
            }
        return True


class _JSONFormatter(logging.Formatter):
    """One JSON object per line.

    Example::

        {"timestamp": "2026-01-01T12:00:00+00:00", "level": "DEBUG",
         "logger": "secretforge.engine", "message": "Generated PIN secret ...",
         "component": "engine", "operation": "generate",
         "context": {"mode": "PIN"}}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "component": getattr(record, "component", None),
        }
        operation = getattr(record, "operation", None)
        if operation:
            entry["operation"] = operation
        context = getattr(record, "forge_context", None)
        if context:
            entry["context"] = context
        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _console_handler(level: int) -> RichHandler:
    """Rich handler on stderr so that stdout stays clean for command output."""
    return RichHandler(
        level=level,
        console=Console(theme=_LOG_THEME, stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )


def _file_handler(
    path: Path, level: int, json_logs: bool, max_bytes: int, backup_count: int
) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(
        _JSONFormatter() if json_logs
        else logging.Formatter(_TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
    )
    return handler


# ========================== ForgeLogger ====================================


class ForgeLogger:
    """Structured logger for one SecretForge component.

    Usage::

        log = ForgeLogger("engine", log_level="DEBUG")
        with log.operation("generate"):
            log.debug("Drawing %d symbols", length, mode="RANDOM")

    Args:
        component:      Name appended to ``secretforge.`` for the logger.
        log_level:      Minimum severity name; unknown names mean WARNING.
        log_file:       Rotating log file path; ``None`` or ``""`` disables it.
        json_logs:      Write JSON lines instead of plain text to the file.
        max_bytes:      File size that triggers rotation (default 10 MiB).
        backup_count:   Rotated files kept.
        console_output: Attach the Rich stderr handler.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        self._component = component
        self._operation: str | None = None
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

        self._logger = logging.getLogger(f"secretforge.{component}")
        self._logger.setLevel(level)
        self._logger.propagate = False
        for old in list(self._logger.handlers):
            self._logger.removeHandler(old)
            old.close()

        handlers: list[logging.Handler] = []
        if console_output:
            handlers.append(_console_handler(level))
        if log_file:
            handlers.append(
                _file_handler(Path(log_file), level, json_logs, max_bytes, backup_count)
            )
        for handler in handlers:
            handler.addFilter(_RedactionFilter())
            self._logger.addHandler(handler)

    # ------------------------------------------------------------------ #
    #  Scopes
    # ------------------------------------------------------------------ #

    @contextmanager
    def operation(self, name: str) -> Iterator[ForgeLogger]:
        """Tag every record logged inside the block with *name*."""
        previous, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log *label* at DEBUG on entry and again with the elapsed time on exit."""
        start = time.perf_counter()
        self.debug("Started: %s", label)
        try:
            yield
        finally:
            self.debug("Completed: %s (%.3f sec)", label, time.perf_counter() - start)

    # ------------------------------------------------------------------ #
    #  Log methods
    # ------------------------------------------------------------------ #

    def _log(self, level: int, msg: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        context = {k: v for k, v in kwargs.items() if k not in _LOGGING_KWARGS}
        extra = dict(kwargs.get("extra") or {})
        extra.update(component=self._component, operation=self._operation)
        if context:
            extra["forge_context"] = context
        self._logger.log(
            level, msg, *args,
            exc_info=kwargs.get("exc_info"),
            stack_info=kwargs.get("stack_info", False),
            stacklevel=kwargs.get("stacklevel", 1) + 2,
            extra=extra,
        )

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, args, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, args, kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """ERROR-level record carrying the exception being handled."""
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, msg, args, kwargs)

    @property
    def underlying(self) -> logging.Logger:
        """The wrapped :class:`logging.Logger`."""
        return self._logger
