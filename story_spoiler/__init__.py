"""Story Spoiler API end-to-end suite package.

Holds the reusable pieces the test suites share: validated configuration,
logging setup, request/response DTOs, the authenticated HTTP client and
JSON Schema checks for response bodies. Test suites live under `tests/`.
"""

from __future__ import annotations

from story_spoiler.config import SuiteConfig, load_config
from story_spoiler.http.client import StorySpoilerClient

__all__ = ["SuiteConfig", "load_config", "StorySpoilerClient"]
