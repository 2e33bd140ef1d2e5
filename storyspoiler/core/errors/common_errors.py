"""Common error classes used across layers.

Error Types:
- AuthenticationError: Token exchange failures

Usage:
    from storyspoiler.core.errors import AuthenticationError
    from storyspoiler.core.enums import ErrorCode
    from storyspoiler.core.result import Failure

    return Failure(error=AuthenticationError(
        code=ErrorCode.TOKEN_MISSING,
        message="Authentication response did not contain an access token",
    ))
"""

from dataclasses import dataclass

from storyspoiler.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (rejected credentials, missing token).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        status_code: HTTP status returned by the authentication endpoint, if any.
        details: Additional context.
    """

    status_code: int | None = None
