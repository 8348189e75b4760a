"""
Logging support for chromosomes.

Author: chromosomes maintainers
License: MIT
"""

from .logging_config import LogContext, configure_from_settings, configure_logging, get_logger

__all__ = [
    "LogContext",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
]
