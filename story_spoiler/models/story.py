"""Pydantic DTOs exchanged with the Story Spoiler service.

The service speaks camelCase JSON; the models expose the same names the
service documents (Title, Msg, StoryId) and map them through aliases.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    username: str
    password: str


class StoryDTO(BaseModel):
    """Create/edit payload. Empty strings are sent as-is; the server validates."""

    model_config = ConfigDict(populate_by_name=True)

    Title: str = Field(default="", alias="title")
    Description: str = Field(default="", alias="description")
    Url: str | None = Field(default="", alias="url")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class ApiResponseDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    Msg: str | None = Field(default=None, alias="msg")
    StoryId: str | None = Field(default=None, alias="storyId")


__all__ = ["Credentials", "StoryDTO", "ApiResponseDTO"]
