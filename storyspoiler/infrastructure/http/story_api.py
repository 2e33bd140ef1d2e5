"""Story resource client for the Story Spoiler API.

Endpoints:
    POST   /Story/Create        -> 201 {storyId, msg}
    PUT    /Story/Edit/{id}     -> 200 {msg} | 404 {msg}
    GET    /Story/All           -> 200 [...]
    DELETE /Story/Delete/{id}   -> 200 {msg} | 400 {msg}

Every method returns the HTTP outcome wrapped in ``ApiResponse``, whatever
the status, so callers can assert on both success and failure contracts.
"""

from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from storyspoiler.core.constants import (
    API_TIMEOUT_DEFAULT,
    STORY_CREATE_PATH,
    STORY_DELETE_PATH,
    STORY_EDIT_PATH,
    STORY_LIST_PATH,
)
from storyspoiler.core.result import Failure, Result, Success
from storyspoiler.domain.errors import StoryApiError
from storyspoiler.infrastructure.http.base_api_client import BaseAPIClient
from storyspoiler.schemas.story_schemas import (
    ApiResponse,
    StoryMessageResponse,
    StoryRequest,
)


class StoryAPI(BaseAPIClient):
    """Authenticated client for the Story resource.

    This is the authenticated client context of a run: one base URL, one
    bearer token, one connection, shared by every step.

    Example:
        >>> with StoryAPI(base_url=url, access_token=token) as api:
        ...     result = api.create_story(StoryRequest(title="T", description="D"))
    """

    def __init__(
        self,
        *,
        base_url: str,
        access_token: str,
        timeout: float | httpx.Timeout = API_TIMEOUT_DEFAULT,
        http_client: httpx.Client | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url,
            api_name="story_spoiler",
            access_token=access_token,
            timeout=timeout,
            http_client=http_client,
        )

    def create_story(self, story: StoryRequest) -> Result[ApiResponse, StoryApiError]:
        """POST /Story/Create."""
        return self._execute_and_wrap(
            method="POST",
            path=STORY_CREATE_PATH,
            json_data=story.to_payload(),
            operation="create_story",
        )

    def edit_story(
        self, story_id: str, story: StoryRequest
    ) -> Result[ApiResponse, StoryApiError]:
        """PUT /Story/Edit/{story_id}."""
        return self._execute_and_wrap(
            method="PUT",
            path=STORY_EDIT_PATH.format(story_id=quote(story_id, safe="")),
            json_data=story.to_payload(),
            operation="edit_story",
        )

    def list_stories(self) -> Result[ApiResponse, StoryApiError]:
        """GET /Story/All."""
        return self._execute_and_wrap(
            method="GET",
            path=STORY_LIST_PATH,
            operation="list_stories",
        )

    def delete_story(self, story_id: str) -> Result[ApiResponse, StoryApiError]:
        """DELETE /Story/Delete/{story_id}."""
        return self._execute_and_wrap(
            method="DELETE",
            path=STORY_DELETE_PATH.format(story_id=quote(story_id, safe="")),
            operation="delete_story",
        )

    def _execute_and_wrap(
        self,
        *,
        method: str,
        path: str,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[ApiResponse, StoryApiError]:
        """Execute request and wrap the outcome in an ApiResponse.

        Args:
            method: HTTP method.
            path: URL path relative to base_url.
            json_data: Optional JSON body.
            operation: Operation name for logging.

        Returns:
            Success(ApiResponse): Status, raw text and parsed message envelope.
            Failure(StoryApiError): On transport errors only.
        """
        result = self._execute_request(
            method=method,
            path=path,
            json_data=json_data,
            operation=operation,
        )
        if isinstance(result, Failure):
            return result

        response = result.value
        return Success(
            value=ApiResponse(
                status_code=response.status_code,
                text=response.text,
                data=self._parse_message(response, operation),
            )
        )

    def _parse_message(
        self, response: httpx.Response, operation: str
    ) -> StoryMessageResponse | None:
        """Parse the message envelope, or None if the body is not one.

        List responses and bare error pages are legitimate here, so a body
        that is not a JSON object is not an error.
        """
        if not response.content:
            return None

        try:
            data = response.json()
        except ValueError:
            return None

        if not isinstance(data, dict):
            return None

        try:
            return StoryMessageResponse.model_validate(data)
        except ValidationError as e:
            self._logger.warning(
                f"{self._api_name}_api_unexpected_format",
                operation=operation,
                status_code=response.status_code,
                error_count=e.error_count(),
            )
            return None
