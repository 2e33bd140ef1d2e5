"""HTTP clients for the Story Spoiler API.

Usage:
    from storyspoiler.infrastructure.http import AuthenticationAPI, StoryAPI
"""

from storyspoiler.infrastructure.http.authentication_api import AuthenticationAPI
from storyspoiler.infrastructure.http.base_api_client import BaseAPIClient
from storyspoiler.infrastructure.http.story_api import StoryAPI

__all__ = ["AuthenticationAPI", "BaseAPIClient", "StoryAPI"]
