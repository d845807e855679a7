"""
Logging setup for gitremotes.

structlog events are rendered through the standard logging machinery, so
stdout stays reserved for the rendered tree: diagnostics are either dropped,
written to stderr, or written to a log file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger, ProcessorFormatter
from structlog.typing import Processor

_SHARED_PROCESSORS: tuple[Processor, ...] = (
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.TimeStamper(fmt="iso"),
)


def resolve_level(level: int | str) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def _install(min_level: int, handler: logging.Handler) -> None:
    # Loggers are created at import time, before the CLI picks a level.
    structlog.configure(
        processors=_SHARED_PROCESSORS + (ProcessorFormatter.wrap_for_formatter,),
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    if not isinstance(handler, logging.NullHandler):
        handler.setFormatter(
            ProcessorFormatter(
                processor=structlog.dev.ConsoleRenderer(colors=False),
                foreign_pre_chain=_SHARED_PROCESSORS,
            )
        )
    logging.basicConfig(level=min_level, handlers=[handler], force=True)


def configure_logging(
    level: int | str = logging.INFO,
    enable_console: bool = True,
    console_level: int | None = None,
) -> None:
    """
    Configure global logging.

    Parameters
    ----------
    level:
        Minimum level for structlog events and the root logger.
    enable_console:
        Emit to stderr; when False every record is discarded.
    console_level:
        Threshold for the stderr handler. Defaults to ``level``.
    """
    numeric_level = resolve_level(level)
    logging.captureWarnings(True)
    handler: logging.Handler
    if enable_console:
        handler = logging.StreamHandler()
        handler.setLevel(numeric_level if console_level is None else console_level)
    else:
        handler = logging.NullHandler()
    _install(numeric_level, handler)


def redirect_logging_to_file(path: Path, level: int | str = logging.INFO) -> None:
    """Send all log records to ``path`` instead of stderr."""
    path.parent.mkdir(parents=True, exist_ok=True)
    _install(resolve_level(level), logging.FileHandler(path, mode="w", encoding="utf-8"))


def get_logger(name: Optional[str] = None) -> BoundLogger:
    return structlog.get_logger(name)
