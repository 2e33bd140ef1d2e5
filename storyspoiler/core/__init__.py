"""Core shared kernel.

Foundational utilities used across all layers:
- Result types for railway-oriented programming
- Base error classes
- Configuration and constants

The core module has NO dependencies on other application layers.
"""

from storyspoiler.core.enums import ErrorCode
from storyspoiler.core.errors import AuthenticationError, DomainError
from storyspoiler.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
