"""Logging adapters.

Usage:
    from storyspoiler.infrastructure.logging import configure_logging

    logger = configure_logging(settings)
"""

from storyspoiler.core.config import Settings
from storyspoiler.infrastructure.logging.console_adapter import ConsoleAdapter


def configure_logging(settings: Settings) -> ConsoleAdapter:
    """Configure structlog from settings and return the root adapter.

    JSON output is used when requested explicitly or when running in CI.

    Args:
        settings: Loaded settings.

    Returns:
        ConsoleAdapter: Configured adapter.
    """
    return ConsoleAdapter(
        level=settings.log_level_value,
        use_json=settings.log_json or settings.is_ci,
    )


__all__ = ["ConsoleAdapter", "configure_logging"]
