"""Base API client for Story Spoiler HTTP communication.

This module provides a base class for API clients that handles:
- HTTP request execution with timeout/connection error handling
- Bearer token header building
- JSON parsing with error handling
- Structured logging with client context
- Ownership of the underlying httpx.Client (closed on exit)

Architecture:
    - Infrastructure layer (adapter for the external API)
    - Uses httpx's synchronous Client; the suite is strictly sequential
    - Returns Result types (no exceptions for transport errors)
    - HTTP status codes are NOT interpreted here; callers assert on them
"""

from types import TracebackType
from typing import Any, Self

import httpx
import structlog

from storyspoiler.core.constants import (
    API_TIMEOUT_DEFAULT,
    BEARER_PREFIX,
    RESPONSE_BODY_MAX_LENGTH,
)
from storyspoiler.core.enums import ErrorCode
from storyspoiler.core.result import Failure, Result, Success
from storyspoiler.domain.errors import (
    StoryApiError,
    StoryApiInvalidResponseError,
    StoryApiUnavailableError,
)


class BaseAPIClient:
    """Base class for Story Spoiler API clients with shared HTTP handling.

    A client either creates its own ``httpx.Client`` (and closes it in
    ``close()``) or wraps one supplied by the caller, which stays open.
    Use as a context manager to scope the connection to one run.

    Attributes:
        _base_url: API base URL (without trailing slash).
        _api_name: Client identifier for logging and error messages.
        _access_token: Bearer token attached to every request, if set.
        _client: Underlying httpx client.
        _logger: Structured logger with client context.

    Example:
        >>> class HealthAPI(BaseAPIClient):
        ...     def ping(self):
        ...         return self._execute_request(
        ...             method="GET", path="/health", operation="ping"
        ...         )
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_name: str,
        access_token: str | None = None,
        timeout: float | httpx.Timeout = API_TIMEOUT_DEFAULT,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize base API client.

        Args:
            base_url: API base URL (e.g., "https://host/api").
            api_name: Client identifier (e.g., "story_spoiler").
            access_token: Bearer token for authenticated endpoints.
            timeout: Timeout for a client created here.
            http_client: Existing client to reuse instead of creating one.
        """
        self._base_url = base_url.rstrip("/")
        self._api_name = api_name
        self._access_token = access_token
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout)
        self._logger = structlog.get_logger(f"{api_name}_api")

    @property
    def base_url(self) -> str:
        """API base URL without trailing slash."""
        return self._base_url

    @property
    def is_authenticated(self) -> bool:
        """Whether a bearer token is attached to requests."""
        return bool(self._access_token)

    def close(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._owns_client and not self._client.is_closed:
            self._client.close()
            self._logger.debug(f"{self._api_name}_api_client_closed")

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _build_headers(self) -> dict[str, str]:
        """Build request headers, including Authorization when a token is set."""
        headers = {"Accept": "application/json"}
        if self._access_token:
            headers["Authorization"] = f"{BEARER_PREFIX}{self._access_token}"
        return headers

    def _execute_request(
        self,
        *,
        method: str,
        path: str,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[httpx.Response, StoryApiError]:
        """Execute HTTP request with transport error handling.

        Args:
            method: HTTP method (GET, POST, etc.).
            path: URL path relative to base_url.
            json_data: Optional JSON body for POST/PUT requests.
            operation: Operation name for logging.

        Returns:
            Success(httpx.Response): Raw HTTP response, whatever its status.
            Failure(StoryApiUnavailableError): On timeout or connection error.
        """
        url = f"{self._base_url}{path}"

        try:
            response = self._client.request(
                method=method,
                url=url,
                headers=self._build_headers(),
                json=json_data,
            )

        except httpx.TimeoutException as e:
            self._logger.warning(
                f"{self._api_name}_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=StoryApiUnavailableError(
                    code=ErrorCode.API_UNAVAILABLE,
                    message=f"{operation} request timed out",
                    api_name=self._api_name,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                f"{self._api_name}_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=StoryApiUnavailableError(
                    code=ErrorCode.API_UNAVAILABLE,
                    message=f"Failed to connect to {self._base_url}: {e}",
                    api_name=self._api_name,
                )
            )

        self._logger.debug(
            f"{self._api_name}_api_request_completed",
            operation=operation,
            method=method,
            path=path,
            status_code=response.status_code,
        )
        return Success(value=response)

    def _parse_json_object(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[dict[str, Any], StoryApiError]:
        """Parse response as JSON object with error handling.

        Args:
            response: HTTP response to parse.
            operation: Operation name for logging.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(StoryApiInvalidResponseError): On invalid JSON or non-object body.
        """
        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                f"{self._api_name}_api_invalid_json",
                operation=operation,
                status_code=response.status_code,
                error=str(e),
            )
            return Failure(
                error=StoryApiInvalidResponseError(
                    code=ErrorCode.API_INVALID_RESPONSE,
                    message=f"Invalid JSON response for {operation}",
                    api_name=self._api_name,
                    status_code=response.status_code,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        if not isinstance(data, dict):
            self._logger.warning(
                f"{self._api_name}_api_unexpected_format",
                operation=operation,
                data_type=type(data).__name__,
            )
            return Failure(
                error=StoryApiInvalidResponseError(
                    code=ErrorCode.API_INVALID_RESPONSE,
                    message=f"Expected object response for {operation}",
                    api_name=self._api_name,
                    status_code=response.status_code,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        return Success(value=data)
