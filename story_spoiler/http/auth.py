"""Bearer-token authentication against /api/Story/Authentication."""

from __future__ import annotations

import logging
from typing import Generator

import httpx

from story_spoiler import contracts
from story_spoiler.http.errors import AuthenticationError, ResponseContractError
from story_spoiler.models.story import Credentials

AUTH_PATH = "/api/Story/Authentication"

logger = logging.getLogger(__name__)


class BearerAuth(httpx.Auth):
    """Attach `Authorization: Bearer <token>` to every outgoing request."""

    def __init__(self, token: str) -> None:
        self.token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


def fetch_access_token(http: httpx.Client, credentials: Credentials) -> str:
    """Log in and return the `accessToken` from the response body.

    Raises AuthenticationError when the body is not JSON or does not match
    the `auth_response` schema; the status code is not checked separately.
    """
    resp = http.post(AUTH_PATH, json=credentials.model_dump())
    logger.info("POST %s -> %s", AUTH_PATH, resp.status_code)
    try:
        body = resp.json()
    except ValueError:
        raise AuthenticationError(
            "Authentication response is not JSON", status_code=resp.status_code, body=resp.text
        )
    try:
        contracts.validate_body(body, "auth_response")
    except ResponseContractError as e:
        raise AuthenticationError(
            f"Authentication response has no accessToken: {e}", status_code=resp.status_code, body=resp.text
        ) from e
    return body["accessToken"]


__all__ = ["AUTH_PATH", "BearerAuth", "fetch_access_token"]
