"""In-memory FastAPI fake of the Story Spoiler API.

Mirrors the documented contract closely enough for the scenario to run
end to end without network access:

    POST   /api/User/Authentication  200 {accessToken} | 401
    POST   /api/Story/Create         201 {storyId, msg} | 400
    PUT    /api/Story/Edit/{id}      200 {msg} | 404 {msg}
    GET    /api/Story/All            200 [...]
    DELETE /api/Story/Delete/{id}    200 {msg} | 400 {msg}

Every story route requires ``Authorization: Bearer <FAKE_ACCESS_TOKEN>``.
"""

from typing import Any
from uuid import uuid4

from fastapi import APIRouter, Body, Depends, FastAPI, Header, HTTPException, status
from fastapi.responses import JSONResponse

from storyspoiler.core.constants import (
    BEARER_PREFIX,
    MSG_CREATED,
    MSG_DELETE_FAILED,
    MSG_DELETED,
    MSG_EDIT_NOT_FOUND,
    MSG_EDITED,
)

FAKE_USERNAME = "tester"
FAKE_PASSWORD = "correct-horse"
FAKE_ACCESS_TOKEN = "fake-jwt-token"


def _field(payload: dict[str, Any], name: str) -> str:
    """Read a story field case-insensitively, like ASP.NET model binding."""
    for key, value in payload.items():
        if key.lower() == name and isinstance(value, str):
            return value
    return ""


def create_story_spoiler_app(
    *,
    username: str = FAKE_USERNAME,
    password: str = FAKE_PASSWORD,
    access_token: str | None = FAKE_ACCESS_TOKEN,
) -> FastAPI:
    """Build a fresh app with its own empty story store.

    Args:
        username: Accepted username.
        password: Accepted password.
        access_token: Token issued on login; None simulates a login
            response without a token.
    """
    stories: dict[str, dict[str, str]] = {}
    app = FastAPI(title="Story Spoiler (fake)")
    router = APIRouter(prefix="/api")

    def require_token(authorization: str | None = Header(default=None)) -> None:
        if access_token is None or authorization != f"{BEARER_PREFIX}{access_token}":
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)

    @router.post("/User/Authentication")
    def authenticate(payload: dict[str, Any] = Body(...)) -> JSONResponse:
        if payload.get("username") != username or payload.get("password") != password:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"msg": "Invalid username or password"},
            )
        content = {"accessToken": access_token} if access_token is not None else {}
        return JSONResponse(status_code=status.HTTP_200_OK, content=content)

    @router.post("/Story/Create", dependencies=[Depends(require_token)])
    def create_story(payload: dict[str, Any] = Body(...)) -> JSONResponse:
        title = _field(payload, "title")
        description = _field(payload, "description")
        if not title or not description:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={
                    "title": "One or more validation errors occurred.",
                    "errors": {"Title": ["required"], "Description": ["required"]},
                },
            )
        story_id = str(uuid4())
        stories[story_id] = {"title": title, "description": description}
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content={"storyId": story_id, "msg": MSG_CREATED},
        )

    @router.put("/Story/Edit/{story_id}", dependencies=[Depends(require_token)])
    def edit_story(story_id: str, payload: dict[str, Any] = Body(...)) -> JSONResponse:
        if story_id not in stories:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"msg": MSG_EDIT_NOT_FOUND},
            )
        stories[story_id] = {
            "title": _field(payload, "title"),
            "description": _field(payload, "description"),
        }
        return JSONResponse(status_code=status.HTTP_200_OK, content={"msg": MSG_EDITED})

    @router.get("/Story/All", dependencies=[Depends(require_token)])
    def list_stories() -> list[dict[str, str]]:
        return [{"id": story_id, **story} for story_id, story in stories.items()]

    @router.delete("/Story/Delete/{story_id}", dependencies=[Depends(require_token)])
    def delete_story(story_id: str) -> JSONResponse:
        if stories.pop(story_id, None) is None:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"msg": MSG_DELETE_FAILED},
            )
        return JSONResponse(status_code=status.HTTP_200_OK, content={"msg": MSG_DELETED})

    app.include_router(router)
    return app
