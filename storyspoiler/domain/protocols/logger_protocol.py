"""LoggerProtocol definition for structured logging.

Standardizes structured logging while remaining backend-agnostic. Both
``ConsoleAdapter`` and a plain structlog logger satisfy it.

Security:
    - NEVER log passwords or bearer tokens

Usage:
    from storyspoiler.domain.protocols import LoggerProtocol

    logger: LoggerProtocol = configure_logging(settings)
    run_logger = logger.bind(run_id=run_id)
    run_logger.info("scenario_step_passed", step="create_story")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> Any:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> Any:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> Any:
        """Log a warning-level message."""
        ...

    def error(self, message: str, /, **context: Any) -> Any:
        """Log an error-level message."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger with context included in every subsequent call."""
        ...
