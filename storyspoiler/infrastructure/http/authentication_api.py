"""Token exchange client for the Story Spoiler API.

POST /User/Authentication with ``{username, password}`` returns
``{accessToken}``. A missing or empty token is a failure: the suite must
not continue with an anonymous client.
"""

import httpx
from pydantic import ValidationError

from storyspoiler.core.constants import API_TIMEOUT_DEFAULT, AUTHENTICATION_PATH
from storyspoiler.core.enums import ErrorCode
from storyspoiler.core.errors import AuthenticationError
from storyspoiler.core.result import Failure, Result, Success
from storyspoiler.infrastructure.http.base_api_client import BaseAPIClient
from storyspoiler.schemas.auth_schemas import AuthenticationRequest, TokenResponse

_REJECTED_STATUSES = frozenset({400, 401, 403})


class AuthenticationAPI(BaseAPIClient):
    """Unauthenticated client that exchanges credentials for a bearer token."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float | httpx.Timeout = API_TIMEOUT_DEFAULT,
        http_client: httpx.Client | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url,
            api_name="story_spoiler_auth",
            timeout=timeout,
            http_client=http_client,
        )

    def authenticate(
        self, username: str, password: str
    ) -> Result[str, AuthenticationError]:
        """Exchange credentials for an access token.

        Args:
            username: Account username.
            password: Account password.

        Returns:
            Success(str): Non-empty bearer token.
            Failure(AuthenticationError): Transport failure, rejected
                credentials, unparseable body, or no token in the body.
        """
        operation = "authenticate"
        payload = AuthenticationRequest(username=username, password=password)

        result = self._execute_request(
            method="POST",
            path=AUTHENTICATION_PATH,
            json_data=payload.model_dump(),
            operation=operation,
        )
        if isinstance(result, Failure):
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.AUTHENTICATION_FAILED,
                    message=f"Authentication request failed: {result.error.message}",
                )
            )

        response = result.value
        if response.status_code != 200:
            code = (
                ErrorCode.INVALID_CREDENTIALS
                if response.status_code in _REJECTED_STATUSES
                else ErrorCode.AUTHENTICATION_FAILED
            )
            self._logger.warning(
                "story_spoiler_auth_api_rejected",
                operation=operation,
                status_code=response.status_code,
                username=username,
            )
            return Failure(
                error=AuthenticationError(
                    code=code,
                    message=f"Authentication returned HTTP {response.status_code}",
                    status_code=response.status_code,
                )
            )

        parsed = self._parse_json_object(response, operation)
        if isinstance(parsed, Failure):
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.AUTHENTICATION_FAILED,
                    message=parsed.error.message,
                    status_code=response.status_code,
                )
            )

        try:
            token = TokenResponse.model_validate(parsed.value).access_token
        except ValidationError as e:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.AUTHENTICATION_FAILED,
                    message=f"Malformed authentication response: {e.error_count()} invalid field(s)",
                    status_code=response.status_code,
                )
            )

        if not token:
            self._logger.error(
                "story_spoiler_auth_api_token_missing",
                operation=operation,
                username=username,
            )
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_MISSING,
                    message="Authentication response did not contain an access token",
                    status_code=response.status_code,
                )
            )

        self._logger.info(
            "story_spoiler_auth_api_authenticated",
            operation=operation,
            username=username,
        )
        return Success(value=token)
