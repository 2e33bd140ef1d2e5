"""Story Spoiler API error types.

These errors are the failure contract of the HTTP clients. Expected
non-2xx outcomes (400, 404) are NOT errors here: the suite asserts on
them, so clients hand back the response. Errors only describe calls that
produced no usable response.

Architecture:
- Inherit from DomainError (core layer)
- Used in Result types (railway-oriented programming)

Usage:
    from storyspoiler.domain.errors import StoryApiError
    from storyspoiler.core.result import Failure, Result, Success

    def list_stories(self) -> Result[ApiResponse, StoryApiError]:
        ...
"""

from dataclasses import dataclass

from storyspoiler.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class StoryApiError(DomainError):
    """Base Story Spoiler API error.

    Attributes:
        code: ErrorCode.
        message: Human-readable message.
        api_name: Client identifier (used in log event names).
        details: Additional context.
    """

    api_name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class StoryApiUnavailableError(StoryApiError):
    """API could not be reached.

    Raised when:
    - Request times out
    - Connection is refused or reset

    Attributes:
        is_transient: Whether retrying later could succeed.
    """

    is_transient: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class StoryApiInvalidResponseError(StoryApiError):
    """API responded with a body that could not be interpreted.

    Attributes:
        status_code: HTTP status of the response.
        response_body: Truncated raw response body for debugging.
    """

    status_code: int | None = None
    response_body: str | None = None
