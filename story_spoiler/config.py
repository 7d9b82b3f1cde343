"""Configuration utilities for the Story Spoiler suite.

This module loads runtime configuration with the following rules:
- Precedence: environment variables, then optional text files under `config/`,
  then `story_spoiler_config.json` at the project root, then built-in defaults.
- Validation: Pydantic models enforce required fields and value constraints.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator


CONFIG_DIR = Path("config")
ROOT_CONFIG = Path("story_spoiler_config.json")

DEFAULT_BASE_URL = "https://d3s5nxhwblsjbi.cloudfront.net"
DEFAULT_USERNAME = "gabbypetrova"
DEFAULT_PASSWORD = "gaby123"
DEFAULT_TIMEOUT = "10.0"

logger = logging.getLogger(__name__)


def _read_config_file(rel_path: str) -> Optional[str]:
    path = CONFIG_DIR / rel_path
    try:
        if path.exists():
            return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        # Recoverable: log and ignore unreadable override
        logger.warning("Failed to read override %s: %s", path, e)
        return None
    return None


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(key, default)


class ApiConfig(BaseModel):
    base_url: str
    timeout: float = Field(default=10.0, gt=0)

    @field_validator("base_url")
    @classmethod
    def base_url_must_be_http(cls, v: str) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("api.base_url must be a non-empty string")
        v = v.strip().rstrip("/")
        if not (v.startswith("http://") or v.startswith("https://")):
            raise ValueError("api.base_url must start with http:// or https://")
        return v


class CredentialsConfig(BaseModel):
    username: str
    password: str

    @field_validator("username")
    @classmethod
    def username_must_be_non_empty(cls, v: str) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("credentials.username must be a non-empty string")
        return v


class SuiteConfig(BaseModel):
    api: ApiConfig
    credentials: CredentialsConfig


def _read_json_file(path: Path) -> dict:
    try:
        if path.exists():
            return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("Failed to read JSON config %s: %s", path, e)
    return {}


def load_config() -> SuiteConfig:
    """Load configuration with validation.

    Precedence (highest first):
    1) Environment variables (a local .env is loaded without overriding them)
    2) Text files in `config/` (optional)
    3) story_spoiler_config.json at project root
    4) Defaults pointing at the public Story Spoiler service
    """

    load_dotenv(override=False)
    base = _read_json_file(ROOT_CONFIG)

    def _base(path: str, default: Optional[str] = None) -> Optional[str]:
        cur: object = base
        for key in path.split("."):
            if not isinstance(cur, dict) or key not in cur:
                return default
            cur = cur[key]
        return str(cur) if cur is not None else default

    base_url = _env("STORY_SPOILER_BASE_URL") or _read_config_file("base_url") or _base("api.base_url", DEFAULT_BASE_URL)
    timeout_text = _env("STORY_SPOILER_TIMEOUT") or _read_config_file("timeout") or _base("api.timeout", DEFAULT_TIMEOUT)
    username = _env("STORY_SPOILER_USERNAME") or _read_config_file("username") or _base("credentials.username", DEFAULT_USERNAME)
    password = _env("STORY_SPOILER_PASSWORD") or _read_config_file("password") or _base("credentials.password", DEFAULT_PASSWORD)

    try:
        cfg = SuiteConfig(
            api=ApiConfig(base_url=base_url, timeout=str(timeout_text).strip()),
            credentials=CredentialsConfig(username=username, password=password),
        )
        return cfg
    except PydanticValidationError as e:
        logger.error("Invalid suite configuration: %s", e)
        raise


def live_mode_enabled() -> bool:
    """Return True when runs against the real service are requested."""
    return (_env("STORY_SPOILER_LIVE", "") or "").strip().lower() in {"1", "true", "yes", "on"}


__all__ = [
    "ApiConfig",
    "CredentialsConfig",
    "SuiteConfig",
    "load_config",
    "live_mode_enabled",
]
