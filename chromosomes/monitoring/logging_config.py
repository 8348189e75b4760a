"""
Logging Configuration for chromosomes.

Loguru sinks for the CLI and library users. Optimizer runs bind a short
``run_id`` to every record they emit, so interleaved runs stay separable
in a shared log file.

Author: chromosomes maintainers
License: MIT
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from loguru import logger

if TYPE_CHECKING:
    from ..config import LoggingConfig


CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "run={extra[run_id]} | {name}:{function}:{line} - {message}"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation: str = "10 MB",
    retention: int = 5,
    serialize: bool = False,
) -> None:
    """
    Replace every loguru sink with a console sink and an optional file sink.

    Args:
        log_level: Minimum level for both sinks
        log_file: Optional log file path (parent directories are created)
        rotation: File size or interval at which the log file rotates
        retention: Number of rotated files to keep
        serialize: Emit one JSON object per record instead of text
    """
    level = log_level.upper()

    logger.remove()
    # Records logged outside an optimizer run still satisfy FILE_FORMAT
    logger.configure(extra={"component": "chromosomes", "run_id": "-"})

    logger.add(
        sys.stderr,
        level=level,
        format="{message}" if serialize else CONSOLE_FORMAT,
        colorize=not serialize,
        serialize=serialize,
    )

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_file),
            level=level,
            format="{message}" if serialize else FILE_FORMAT,
            rotation=rotation,
            retention=retention,
            serialize=serialize,
        )

    logger.debug(f"Logging configured (level={level}, file={log_file})")


def configure_from_settings(settings: LoggingConfig, verbose: bool = False) -> None:
    """Configure sinks from a ``LoggingConfig`` section; ``verbose`` forces DEBUG."""
    configure_logging(
        log_level="DEBUG" if verbose else settings.level,
        log_file=settings.log_file,
        serialize=settings.serialize,
    )


def get_logger(name: str):
    """Return the shared logger bound to a component name."""
    return logger.bind(component=name)


class LogContext:
    """
    Context manager adding key-value pairs to every record logged inside it.

    Example:
        >>> with LogContext(run_id="1f2e3d4c"):
        ...     logger.info("Generation complete")
    """

    def __init__(self, **fields):
        self.fields = fields
        self._scope = None

    def __enter__(self):
        self._scope = logger.contextualize(**self.fields)
        self._scope.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._scope is not None:
            self._scope.__exit__(exc_type, exc_val, exc_tb)
            self._scope = None
