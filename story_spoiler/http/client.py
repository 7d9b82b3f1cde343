"""Authenticated HTTP client for the Story Spoiler API.

One method per endpoint. Every method returns the raw `httpx.Response` so
callers assert on status code and body literally; only transport errors
raise. The underlying `httpx.Client` is created once and released by
`close()` (or by leaving the `with` block).
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

import httpx

from story_spoiler.config import SuiteConfig
from story_spoiler.http.auth import BearerAuth, fetch_access_token
from story_spoiler.http.errors import ResponseContractError
from story_spoiler.models.story import ApiResponseDTO, Credentials, StoryDTO

CREATE_PATH = "/api/Story/Create"
EDIT_PATH = "/api/Story/Edit"
LIST_PATH = "/api/Story/All"
DELETE_PATH = "/api/Story/Delete"

logger = logging.getLogger(__name__)

StoryPayload = Union[StoryDTO, dict]


def _payload(story: StoryPayload) -> dict:
    if isinstance(story, StoryDTO):
        return story.to_payload()
    return dict(story)


class StorySpoilerClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        http: Optional[httpx.Client] = None,
    ) -> None:
        # An injected client (e.g. a TestClient) keeps its own base URL
        self._owns_http = http is None
        self._http = http if http is not None else httpx.Client(base_url=base_url, timeout=httpx.Timeout(timeout))
        self._closed = False
        self._auth: Optional[BearerAuth] = None
        self.token: Optional[str] = None

    @classmethod
    def from_config(
        cls,
        config: SuiteConfig,
        *,
        http: Optional[httpx.Client] = None,
        login: bool = True,
    ) -> "StorySpoilerClient":
        """Build a client for `config.api` and, by default, log in with `config.credentials`."""
        client = cls(config.api.base_url, timeout=config.api.timeout, http=http)
        if login:
            try:
                client.authenticate(
                    Credentials(username=config.credentials.username, password=config.credentials.password)
                )
            except Exception:
                client.close()
                raise
        return client

    def authenticate(self, credentials: Credentials) -> str:
        token = fetch_access_token(self._http, credentials)
        self._auth = BearerAuth(token)
        self.token = token
        logger.info("Authenticated as %s", credentials.username)
        return token

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        # Per-request auth leaves an injected client untouched
        if self._auth is not None:
            kwargs.setdefault("auth", self._auth)
        resp = self._http.request(method, path, **kwargs)
        logger.info("%s %s -> %s", method, path, resp.status_code)
        return resp

    def create_story(self, story: StoryPayload) -> httpx.Response:
        return self._send("POST", CREATE_PATH, json=_payload(story))

    def edit_story(self, story_id: str, story: StoryPayload, *, param_name: str = "storyId") -> httpx.Response:
        return self._send("PUT", EDIT_PATH, params={param_name: story_id}, json=_payload(story))

    def list_stories(self) -> httpx.Response:
        return self._send("GET", LIST_PATH)

    def delete_story(self, story_id: str) -> httpx.Response:
        return self._send("DELETE", f"{DELETE_PATH}/{story_id}")

    def delete_story_by_query(self, param_name: str, value: str) -> httpx.Response:
        return self._send("DELETE", DELETE_PATH, params={param_name: value})

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "StorySpoilerClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def parse_api_response(response: httpx.Response) -> ApiResponseDTO:
    """Decode an acknowledgment body ({"msg", "storyId"})."""
    try:
        body = response.json()
    except ValueError as e:
        raise ResponseContractError(f"Expected JSON object, got: {response.text[:200]!r}") from e
    if not isinstance(body, dict):
        raise ResponseContractError(f"Expected JSON object, got {type(body).__name__}")
    return ApiResponseDTO.model_validate(body)


def parse_story_list(response: httpx.Response) -> list:
    try:
        body = response.json()
    except ValueError as e:
        raise ResponseContractError(f"Expected JSON array, got: {response.text[:200]!r}") from e
    if not isinstance(body, list):
        raise ResponseContractError(f"Expected JSON array, got {type(body).__name__}")
    return body


__all__ = [
    "CREATE_PATH",
    "EDIT_PATH",
    "LIST_PATH",
    "DELETE_PATH",
    "StorySpoilerClient",
    "parse_api_response",
    "parse_story_list",
]
