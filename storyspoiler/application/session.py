"""Authenticated session setup.

Exchanges the configured credentials for a bearer token with a dedicated
login client, then builds the ``StoryAPI`` that every step shares. The
login connection is closed as soon as the token is obtained; the story
connection lives until the session context exits.

Usage:
    with open_story_session(settings) as api:
        run_story_lifecycle(ScenarioContext(api=api))
"""

from collections.abc import Iterator
from contextlib import contextmanager

import httpx
import structlog

from storyspoiler.application.errors import SessionSetupError
from storyspoiler.core.config import Settings, get_settings
from storyspoiler.core.result import Failure
from storyspoiler.infrastructure.http import AuthenticationAPI, StoryAPI

logger = structlog.get_logger("story_session")


def obtain_access_token(
    settings: Settings, *, http_client: httpx.Client | None = None
) -> str:
    """Authenticate with the configured credentials.

    Args:
        settings: Loaded settings (base URL, credentials, timeouts).
        http_client: Optional client to send the request through.

    Returns:
        str: Non-empty bearer token.

    Raises:
        SessionSetupError: If no token could be obtained.
    """
    with AuthenticationAPI(
        base_url=settings.api_base_url,
        timeout=settings.get_http_timeout(),
        http_client=http_client,
    ) as auth_api:
        result = auth_api.authenticate(
            settings.username, settings.password.get_secret_value()
        )

    if isinstance(result, Failure):
        logger.error(
            "session_authentication_failed",
            code=result.error.code.value,
            status_code=result.error.status_code,
        )
        raise SessionSetupError(
            str(result.error), step="authenticate", domain_error=result.error
        )

    return result.value


@contextmanager
def open_story_session(
    settings: Settings | None = None, *, http_client: httpx.Client | None = None
) -> Iterator[StoryAPI]:
    """Yield an authenticated StoryAPI, closing it on exit.

    Args:
        settings: Settings to use; loaded from the environment when omitted.
        http_client: Optional client shared by the login and story clients
            (left open; the caller owns it).

    Yields:
        StoryAPI: Client carrying the bearer token.

    Raises:
        SessionSetupError: If authentication fails.
    """
    settings = settings or get_settings()
    token = obtain_access_token(settings, http_client=http_client)

    api = StoryAPI(
        base_url=settings.api_base_url,
        access_token=token,
        timeout=settings.get_http_timeout(),
        http_client=http_client,
    )
    logger.info(
        "session_opened",
        base_url=api.base_url,
        authenticated=api.is_authenticated,
    )
    try:
        yield api
    finally:
        api.close()
        logger.info("session_closed", base_url=api.base_url)
