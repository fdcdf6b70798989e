"""Logging utilities for zsh-prompts.

Standard output is the prompt itself, so every logger built here writes to
a log file and nothing else. Loggers are standalone structlog loggers: they
never touch the global structlog configuration, which keeps the library
safe to embed.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

import structlog

from ._paths import get_cli_log_file

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger, Processor

LogFormatType = Literal["json", "text"]

_DEBUG_ENV = "ZSH_PROMPTS_DEBUG"
_LEVEL_ENV = "ZSH_PROMPTS_LOG_LEVEL"
_DEFAULT_LEVEL = logging.WARNING


def _resolve_level(level: str | None = None) -> int:
    """Determine the effective log level.

    Precedence: ``ZSH_PROMPTS_DEBUG`` (any non-empty value means DEBUG),
    then ``level``, then ``ZSH_PROMPTS_LOG_LEVEL``, then WARNING. Unknown
    level names resolve to WARNING.

    Args:
        level: Explicit level name (debug, info, warning, error), or None.

    Returns:
        The logging level as an integer.
    """
    if getenv(_DEBUG_ENV):
        return logging.DEBUG

    name = level if level is not None else getenv(_LEVEL_ENV, "warning")
    return logging.getLevelNamesMapping().get(name.upper(), _DEFAULT_LEVEL)


def _processors(log_format: LogFormatType) -> list[Processor]:
    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "json":
        processors += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        # "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def _rotating_sink(log_path: Path, level: int, max_bytes: int, backup_count: int) -> logging.Logger:
    """Return a private stdlib logger that writes rendered lines to a rotating file."""
    sink = logging.getLogger(f"zsh_prompts.{log_path.stem}.{id(log_path)}")
    sink.handlers.clear()
    sink.propagate = False
    sink.setLevel(level)

    handler = RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    sink.addHandler(handler)
    return sink


def _create_logger(
    log_file_path: str,
    *,
    log_level: int | None = None,
    log_format: LogFormatType = "json",
    max_bytes: int | None = None,
    backup_count: int | None = None,
) -> FilteringBoundLogger:
    """Create a standalone structlog logger appending to ``log_file_path``.

    Rotation is enabled only when both ``max_bytes`` and ``backup_count``
    are given; otherwise the file is opened in append mode and grows
    without bound.

    Args:
        log_file_path: Path to the log file. Missing parent directories are
            created.
        log_level: Level threshold. If None, resolved from the environment.
        log_format: Output format, either "json" or "text".
        max_bytes: Maximum file size before rotation.
        backup_count: Number of rotated files to keep.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    log_path = Path(log_file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    level = log_level if log_level is not None else _resolve_level()

    if max_bytes is not None and backup_count is not None:
        raw_logger: object = _rotating_sink(log_path, level, max_bytes, backup_count)
    else:
        raw_logger = structlog.WriteLoggerFactory(file=log_path.open("a"))()

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            raw_logger,
            processors=_processors(log_format),
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
        ),
    )


def create_null_logger() -> FilteringBoundLogger:
    """Create a logger that discards every event.

    Library functions fall back to this when the caller passes no logger.
    """
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.ReturnLogger(),
            processors=[],
            wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
            context_class=dict,
        ),
    )


def create_cli_logger(
    *,
    level: str | None = None,
    log_format: LogFormatType = "json",
    log_file: str = "",
    command: str = "",
    max_bytes: int | None = None,
    backup_count: int | None = None,
) -> FilteringBoundLogger:
    """Create a logger for CLI commands.

    The level is resolved by ``ZSH_PROMPTS_DEBUG``, then ``level``, then
    ``ZSH_PROMPTS_LOG_LEVEL``, then WARNING.

    Args:
        level: Optional log level threshold (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to log file (uses the default log file if empty).
        command: Name of the CLI command, bound to every entry when given.
        max_bytes: Maximum size in bytes before rotation.
        backup_count: Number of rotated log files to keep.

    Returns:
        A FilteringBoundLogger instance configured for CLI logging.
    """
    logger = _create_logger(
        log_file or str(get_cli_log_file()),
        log_level=_resolve_level(level),
        log_format=log_format,
        max_bytes=max_bytes,
        backup_count=backup_count,
    )
    return logger.bind(command=command) if command else logger
