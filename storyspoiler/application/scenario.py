"""Story lifecycle scenario.

Each step issues one request through the shared ``StoryAPI`` and checks
the response against the documented contract:

    create             201, non-empty storyId, "Successfully created!"
    edit               200, "Successfully edited"
    list               200, body contains "["
    delete             200, "Deleted successfully!"
    delete again       400, "Unable to delete this story spoiler!"
    create invalid     400
    edit nonexistent   404, "No spoilers..."
    delete nonexistent 400, "Unable to delete this story spoiler!"

State carried between steps lives on ``ScenarioContext``; steps never
read module globals. ``run_story_lifecycle`` composes every step in the
only order that is meaningful.

Usage:
    with open_story_session(settings) as api:
        outcomes = run_story_lifecycle(ScenarioContext(api=api))
"""

from dataclasses import dataclass, field

import structlog

from storyspoiler.application.errors import (
    ScenarioAssertionError,
    ScenarioStateError,
    ScenarioTransportError,
)
from storyspoiler.core.constants import (
    MSG_CREATED,
    MSG_DELETE_FAILED,
    MSG_DELETED,
    MSG_EDIT_NOT_FOUND,
    MSG_EDITED,
    NON_EXISTING_STORY_ID,
    RESPONSE_BODY_MAX_LENGTH,
)
from storyspoiler.core.result import Failure, Result
from storyspoiler.domain.errors import StoryApiError
from storyspoiler.domain.protocols import LoggerProtocol
from storyspoiler.infrastructure.http import StoryAPI
from storyspoiler.schemas.story_schemas import ApiResponse, StoryRequest

NEW_STORY = StoryRequest(title="New Story", description="This is a spoiler")
UPDATED_STORY = StoryRequest(title="Updated Story", description="Updated spoiler")
NON_EXISTENT_STORY = StoryRequest(
    title="Non-existent Story", description="This does not exist"
)
EMPTY_STORY = StoryRequest(title="", description="")


@dataclass(frozen=True, slots=True, kw_only=True)
class StepOutcome:
    """Record of a step that passed.

    Attributes:
        step: Step name.
        status_code: HTTP status received.
        msg: Response message, if any.
    """

    step: str
    status_code: int
    msg: str | None = None


@dataclass(kw_only=True)
class ScenarioContext:
    """Per-run state shared by the scenario steps.

    Attributes:
        api: Authenticated client used by every step.
        created_story_id: Id returned by the last successful create.
        outcomes: Steps that passed, in execution order.
        logger: Structured logger; defaults to a structlog logger.
    """

    api: StoryAPI
    created_story_id: str | None = None
    outcomes: list[StepOutcome] = field(default_factory=list)
    logger: LoggerProtocol | None = None

    def __post_init__(self) -> None:
        if self.logger is None:
            self.logger = structlog.get_logger("story_scenario")

    def require_story_id(self, step: str) -> str:
        """Return the created story id or fail the step.

        Raises:
            ScenarioStateError: If no story has been created in this run.
        """
        if not self.created_story_id:
            raise ScenarioStateError(
                f"{step}: no story has been created in this run",
                step=step,
            )
        return self.created_story_id


def _unwrap(
    context: ScenarioContext, step: str, result: Result[ApiResponse, StoryApiError]
) -> ApiResponse:
    if isinstance(result, Failure):
        context.logger.error(
            "scenario_step_failed", step=step, reason=result.error.message
        )
        raise ScenarioTransportError(
            f"{step}: {result.error}", step=step, domain_error=result.error
        )
    return result.value


def _fail(
    context: ScenarioContext, step: str, response: ApiResponse, reason: str
) -> ScenarioAssertionError:
    context.logger.error(
        "scenario_step_failed",
        step=step,
        status_code=response.status_code,
        reason=reason,
    )
    body = response.text[:RESPONSE_BODY_MAX_LENGTH]
    return ScenarioAssertionError(f"{step}: {reason}; body={body!r}", step=step)


def _expect_status(
    context: ScenarioContext, step: str, response: ApiResponse, expected: int
) -> None:
    if response.status_code != expected:
        raise _fail(
            context,
            step,
            response,
            f"expected HTTP {expected}, got {response.status_code}",
        )


def _expect_msg(
    context: ScenarioContext, step: str, response: ApiResponse, expected: str
) -> None:
    if response.msg != expected:
        raise _fail(
            context, step, response, f"expected msg {expected!r}, got {response.msg!r}"
        )


def _passed(context: ScenarioContext, step: str, response: ApiResponse) -> StepOutcome:
    outcome = StepOutcome(step=step, status_code=response.status_code, msg=response.msg)
    context.outcomes.append(outcome)
    context.logger.info(
        "scenario_step_passed", step=step, status_code=response.status_code
    )
    return outcome


def create_story_step(
    context: ScenarioContext, story: StoryRequest = NEW_STORY
) -> StepOutcome:
    """Create a story and remember its id on the context."""
    step = "create_story"
    response = _unwrap(context, step, context.api.create_story(story))

    _expect_status(context, step, response, 201)
    if not response.story_id:
        raise _fail(context, step, response, "response has no storyId")
    _expect_msg(context, step, response, MSG_CREATED)

    context.created_story_id = response.story_id
    return _passed(context, step, response)


def edit_story_step(
    context: ScenarioContext, story: StoryRequest = UPDATED_STORY
) -> StepOutcome:
    """Edit the story created in this run."""
    step = "edit_story"
    story_id = context.require_story_id(step)
    response = _unwrap(context, step, context.api.edit_story(story_id, story))

    _expect_status(context, step, response, 200)
    _expect_msg(context, step, response, MSG_EDITED)
    return _passed(context, step, response)


def list_stories_step(context: ScenarioContext) -> StepOutcome:
    """List stories; only the array-like shape of the body is checked."""
    step = "list_stories"
    response = _unwrap(context, step, context.api.list_stories())

    _expect_status(context, step, response, 200)
    if "[" not in response.text:
        raise _fail(context, step, response, "body is not a JSON array")
    return _passed(context, step, response)


def delete_story_step(context: ScenarioContext) -> StepOutcome:
    """Delete the story created in this run."""
    step = "delete_story"
    story_id = context.require_story_id(step)
    response = _unwrap(context, step, context.api.delete_story(story_id))

    _expect_status(context, step, response, 200)
    _expect_msg(context, step, response, MSG_DELETED)
    return _passed(context, step, response)


def _expect_delete_rejected(
    context: ScenarioContext, step: str, story_id: str
) -> StepOutcome:
    response = _unwrap(context, step, context.api.delete_story(story_id))

    _expect_status(context, step, response, 400)
    _expect_msg(context, step, response, MSG_DELETE_FAILED)
    return _passed(context, step, response)


def delete_story_again_step(context: ScenarioContext) -> StepOutcome:
    """Delete the already-deleted story; must behave like an unknown id."""
    step = "delete_story_again"
    return _expect_delete_rejected(context, step, context.require_story_id(step))


def create_invalid_story_step(
    context: ScenarioContext, story: StoryRequest = EMPTY_STORY
) -> StepOutcome:
    """Create with empty fields; only the 400 status is checked."""
    step = "create_invalid_story"
    response = _unwrap(context, step, context.api.create_story(story))

    _expect_status(context, step, response, 400)
    return _passed(context, step, response)


def edit_nonexistent_story_step(
    context: ScenarioContext, story_id: str = NON_EXISTING_STORY_ID
) -> StepOutcome:
    """Edit an id the API never assigned."""
    step = "edit_nonexistent_story"
    response = _unwrap(
        context, step, context.api.edit_story(story_id, NON_EXISTENT_STORY)
    )

    _expect_status(context, step, response, 404)
    _expect_msg(context, step, response, MSG_EDIT_NOT_FOUND)
    return _passed(context, step, response)


def delete_nonexistent_story_step(
    context: ScenarioContext, story_id: str = NON_EXISTING_STORY_ID
) -> StepOutcome:
    """Delete an id the API never assigned."""
    return _expect_delete_rejected(context, "delete_nonexistent_story", story_id)


def discard_created_story(context: ScenarioContext) -> None:
    """Delete the run's story unless a delete step already removed it.

    Used on teardown after a run that stopped between create and delete.
    The response is not checked.
    """
    if context.created_story_id and not any(
        o.step == "delete_story" for o in context.outcomes
    ):
        context.api.delete_story(context.created_story_id)
        context.logger.info(
            "scenario_story_discarded", story_id=context.created_story_id
        )


def run_story_lifecycle(context: ScenarioContext) -> list[StepOutcome]:
    """Run every step in order, stopping at the first failure.

    Order: create, edit, list, delete, delete again, create invalid,
    edit nonexistent, delete nonexistent. The negative edit/delete steps
    run after the created story is gone.

    Returns:
        list[StepOutcome]: One outcome per step, in execution order.

    Raises:
        ScenarioError: Subclass describing the first failed step.
    """
    create_story_step(context)
    edit_story_step(context)
    list_stories_step(context)
    delete_story_step(context)
    delete_story_again_step(context)
    create_invalid_story_step(context)
    edit_nonexistent_story_step(context)
    delete_nonexistent_story_step(context)
    return context.outcomes
