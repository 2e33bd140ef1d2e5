"""Fixtures for smoke tests against the live Story Spoiler API.

Credentials come from STORY_SPOILER_USERNAME / STORY_SPOILER_PASSWORD (or
a .env file). Without them every smoke test is skipped.
"""

import uuid
from collections.abc import Iterator

import pytest
from pydantic import ValidationError

from storyspoiler.application.scenario import (
    ScenarioContext,
    create_story_step,
    discard_created_story,
)
from storyspoiler.application.session import open_story_session
from storyspoiler.core.config import Settings, get_settings
from storyspoiler.infrastructure.http import StoryAPI
from storyspoiler.infrastructure.logging import configure_logging


@pytest.fixture(scope="session")
def live_settings() -> Settings:
    """Settings for the live API, or skip when credentials are absent."""
    try:
        return get_settings()
    except ValidationError:
        pytest.skip("STORY_SPOILER_USERNAME / STORY_SPOILER_PASSWORD not configured")


@pytest.fixture(scope="session")
def live_story_api(live_settings: Settings) -> Iterator[StoryAPI]:
    """One authenticated client for the whole smoke session.

    Closed at session end whichever tests ran or failed.
    """
    with open_story_session(live_settings) as api:
        yield api


@pytest.fixture
def live_context(
    live_settings: Settings, live_story_api: StoryAPI
) -> Iterator[ScenarioContext]:
    """Fresh run state per test, sharing the session's client.

    A story created during the test and not deleted by it is removed on
    teardown, so a failing step does not leave data on the live server.
    """
    logger = configure_logging(live_settings).bind(run_id=uuid.uuid4().hex[:12])
    context = ScenarioContext(api=live_story_api, logger=logger)
    yield context
    discard_created_story(context)


@pytest.fixture
def live_created_story(live_context: ScenarioContext) -> ScenarioContext:
    """Context already holding a story created for one test."""
    create_story_step(live_context)
    return live_context
