"""Story Spoiler API test suite.

Authenticates against the Story Spoiler HTTP API and drives the
create/edit/list/delete lifecycle of a story, asserting on status codes
and response messages.

Usage:
    from storyspoiler.application.scenario import ScenarioContext, run_story_lifecycle
    from storyspoiler.application.session import open_story_session

    with open_story_session() as api:
        outcomes = run_story_lifecycle(ScenarioContext(api=api))
"""

__version__ = "0.1.0"
