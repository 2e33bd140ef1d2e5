"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_MISSING = "token_missing"
    AUTHENTICATION_FAILED = "authentication_failed"

    # Remote API errors
    API_UNAVAILABLE = "api_unavailable"
    API_INVALID_RESPONSE = "api_invalid_response"
