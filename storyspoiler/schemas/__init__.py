"""Pydantic request/response schemas for the Story Spoiler API."""

from storyspoiler.schemas.auth_schemas import AuthenticationRequest, TokenResponse
from storyspoiler.schemas.story_schemas import (
    ApiResponse,
    StoryMessageResponse,
    StoryRequest,
)

__all__ = [
    "ApiResponse",
    "AuthenticationRequest",
    "StoryMessageResponse",
    "StoryRequest",
    "TokenResponse",
]
