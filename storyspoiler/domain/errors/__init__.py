"""Domain errors package.

Usage:
    from storyspoiler.domain.errors import StoryApiError, StoryApiUnavailableError
"""

from storyspoiler.domain.errors.story_api_error import (
    StoryApiError,
    StoryApiInvalidResponseError,
    StoryApiUnavailableError,
)

__all__ = [
    "StoryApiError",
    "StoryApiInvalidResponseError",
    "StoryApiUnavailableError",
]
