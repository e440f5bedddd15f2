"""
Logging setup for the SOLID Document Management System.

Diagnostics go to stderr through the standard logging module so the
document transcript printed on stdout stays untouched.
"""

import logging
import sys

from .config import Settings


def resolve_log_level(settings: Settings) -> int:
    """
    Resolve the numeric logging level for the given settings.

    Debug mode wins over the configured level; unknown level names
    fall back to WARNING.

    Args:
        settings (Settings): Loaded application settings

    Returns:
        int: Logging level
    """
    if settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level.upper(), logging.WARNING)


def configure_logging(settings: Settings) -> None:
    """
    Configure root logging from application settings.

    Args:
        settings (Settings): Loaded application settings
    """
    logging.basicConfig(
        level=resolve_log_level(settings),
        format=settings.log_format,
        stream=sys.stderr
    )
    logging.getLogger(__name__).debug(f"Logging configured ({settings.environment})")
