"""Utility functions for testing.

Provides helpers for generating random story payloads.
"""

import random
import string

from storyspoiler.schemas.story_schemas import StoryRequest

MOCK_BASE_URL = "https://stories.test/api"
"""Base URL intercepted by pytest-httpx."""

FAKE_BASE_URL = "http://testserver/api"
"""Base URL served by the in-process fake API through TestClient."""


def random_lower_string(length: int = 32) -> str:
    """Generate a random lowercase string.

    Args:
        length: Length of the string to generate

    Returns:
        Random lowercase string
    """
    return "".join(random.choices(string.ascii_lowercase, k=length))


def random_story() -> StoryRequest:
    """Generate a story payload with a unique title.

    Returns:
        StoryRequest with non-empty title and description
    """
    return StoryRequest(
        title=f"Story {random_lower_string(8)}",
        description=f"Spoiler {random_lower_string(16)}",
    )
