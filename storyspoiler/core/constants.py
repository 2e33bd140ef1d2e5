"""Centralized constants for the Story Spoiler API contract.

This module contains fixed values of the remote API contract (paths,
expected messages) and internal implementation limits. Anything that
varies per environment belongs in `storyspoiler/core/config.py` instead.

Categories:
- Endpoints: Paths relative to the API base URL
- Messages: Exact `msg` strings the API returns
- Prefixes: Standard protocol prefixes
- Limits: Truncation and safety limits

Example:
    >>> from storyspoiler.core.constants import STORY_CREATE_PATH, BEARER_PREFIX
    >>> header = f"{BEARER_PREFIX}{access_token}"
"""

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_API_BASE_URL: str = "https://d3s5nxhwblsjbi.cloudfront.net/api"
"""Base URL of the hosted Story Spoiler API."""

API_TIMEOUT_DEFAULT: float = 30.0
"""Default total timeout for API calls in seconds."""


# =============================================================================
# Endpoints
# =============================================================================

AUTHENTICATION_PATH: str = "/User/Authentication"
STORY_CREATE_PATH: str = "/Story/Create"
STORY_EDIT_PATH: str = "/Story/Edit/{story_id}"
STORY_LIST_PATH: str = "/Story/All"
STORY_DELETE_PATH: str = "/Story/Delete/{story_id}"


# =============================================================================
# Messages
# =============================================================================

MSG_CREATED: str = "Successfully created!"
MSG_EDITED: str = "Successfully edited"
MSG_EDIT_NOT_FOUND: str = "No spoilers..."
MSG_DELETED: str = "Deleted successfully!"
MSG_DELETE_FAILED: str = "Unable to delete this story spoiler!"

NON_EXISTING_STORY_ID: str = "non-existing-id"
"""Identifier that the API never assigns, used for negative paths."""


# =============================================================================
# Prefixes
# =============================================================================

BEARER_PREFIX: str = "Bearer "
"""HTTP Authorization header prefix for Bearer tokens."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum response body length kept in errors and assertion messages."""
