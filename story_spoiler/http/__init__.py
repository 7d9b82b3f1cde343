"""HTTP layer: bearer authentication and the endpoint client."""

from __future__ import annotations

from story_spoiler.http.auth import BearerAuth, fetch_access_token
from story_spoiler.http.client import StorySpoilerClient, parse_api_response, parse_story_list
from story_spoiler.http.errors import AuthenticationError, ResponseContractError, StorySpoilerError

__all__ = [
    "BearerAuth",
    "fetch_access_token",
    "StorySpoilerClient",
    "parse_api_response",
    "parse_story_list",
    "AuthenticationError",
    "ResponseContractError",
    "StorySpoilerError",
]
