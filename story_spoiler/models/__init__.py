"""Request/response DTOs for the Story Spoiler API."""

from __future__ import annotations

from story_spoiler.models.story import ApiResponseDTO, Credentials, StoryDTO

__all__ = ["ApiResponseDTO", "Credentials", "StoryDTO"]
