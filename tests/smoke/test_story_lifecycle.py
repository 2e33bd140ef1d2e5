"""Smoke Test: Story Spoiler lifecycle against the live API.

Validates the documented contract end to end:
1. Authenticate (session fixture)
2. Create a story (201, storyId, "Successfully created!")
3. Edit it (200, "Successfully edited")
4. List stories (200, JSON array)
5. Delete it (200, "Deleted successfully!")
6. Delete it again (400, "Unable to delete this story spoiler!")
7. Create without required fields (400)
8. Edit a non-existent story (404, "No spoilers...")
9. Delete a non-existent story (400, "Unable to delete this story spoiler!")

The lifecycle runs as one composed scenario; the remaining tests check
single contracts on their own fixtures and do not depend on ordering.
"""

import json

import pytest

from storyspoiler.application.scenario import (
    ScenarioContext,
    create_invalid_story_step,
    delete_nonexistent_story_step,
    delete_story_step,
    edit_nonexistent_story_step,
    edit_story_step,
    list_stories_step,
    run_story_lifecycle,
)
from storyspoiler.core.constants import MSG_CREATED, MSG_DELETE_FAILED

pytestmark = pytest.mark.smoke


def test_smoke_story_lifecycle(live_context: ScenarioContext) -> None:
    """Smoke: the whole ordered lifecycle passes."""
    outcomes = run_story_lifecycle(live_context)

    assert [o.step for o in outcomes] == [
        "create_story",
        "edit_story",
        "list_stories",
        "delete_story",
        "delete_story_again",
        "create_invalid_story",
        "edit_nonexistent_story",
        "delete_nonexistent_story",
    ]
    assert outcomes[0].msg == MSG_CREATED
    assert outcomes[4].msg == MSG_DELETE_FAILED


def test_smoke_created_story_can_be_edited_and_deleted(
    live_created_story: ScenarioContext,
) -> None:
    """Smoke: the id returned by create is accepted by edit and delete."""
    edit_story_step(live_created_story)
    delete_story_step(live_created_story)


def test_smoke_list_returns_json_array(live_context: ScenarioContext) -> None:
    """Smoke: list body parses as a JSON array."""
    list_stories_step(live_context)

    result = live_context.api.list_stories()
    assert isinstance(json.loads(result.value.text), list)


def test_smoke_create_without_required_fields(live_context: ScenarioContext) -> None:
    """Smoke: empty title and description are rejected."""
    create_invalid_story_step(live_context)


def test_smoke_edit_non_existing_story(live_context: ScenarioContext) -> None:
    """Smoke: editing an unknown id yields 404 and the not-found message."""
    edit_nonexistent_story_step(live_context)


def test_smoke_delete_non_existing_story(live_context: ScenarioContext) -> None:
    """Smoke: deleting an unknown id yields 400 and the failure message."""
    delete_nonexistent_story_step(live_context)
