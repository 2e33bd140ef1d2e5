"""Core errors package.

Usage:
    from storyspoiler.core.errors import DomainError, AuthenticationError
"""

from storyspoiler.core.errors.common_errors import AuthenticationError
from storyspoiler.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "AuthenticationError",
]
