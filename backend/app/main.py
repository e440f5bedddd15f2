"""
SOLID Document Management System - Main Module

Console entry point. Loads settings, configures logging and runs the
sample documents through the processing services.
"""

import logging

from pydantic import ValidationError

from core.config import get_default_settings, get_settings
from core.logging_config import configure_logging
from driver import run

logger = logging.getLogger(__name__)


def main() -> int:
    """Run the sample documents and return the process exit code."""
    try:
        settings = get_settings()
        settings_error = None
    except ValidationError as e:
        settings = get_default_settings()
        settings_error = e

    configure_logging(settings)
    if settings_error is not None:
        logger.warning(
            f"Ignoring invalid SOLID_DOCS_* settings, using defaults: "
            f"{settings_error.error_count()} error(s)"
        )

    run()
    return 0


# === MAIN APPLICATION ENTRY POINT ===

if __name__ == "__main__":
    raise SystemExit(main())
