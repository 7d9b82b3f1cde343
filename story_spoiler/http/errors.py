"""Client-side error types.

Non-2xx statuses are returned to the caller untouched; these exceptions
cover failures that leave the suite unable to continue.
"""

from __future__ import annotations

from typing import Optional


class StorySpoilerError(Exception):
    """Base class for errors raised by the story_spoiler package."""


class AuthenticationError(StorySpoilerError):
    def __init__(self, message: str, *, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ResponseContractError(StorySpoilerError):
    """A response body does not have the documented shape."""


__all__ = ["StorySpoilerError", "AuthenticationError", "ResponseContractError"]
