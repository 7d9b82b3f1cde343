"""Live end-to-end bootstrap.

Builds one authenticated client for the whole module from `load_config()`
and closes it at the end. Every test here is marked `live` and skipped
unless STORY_SPOILER_LIVE is truthy, so default runs never touch the network.
"""

from __future__ import annotations

import pytest

from story_spoiler.config import live_mode_enabled, load_config
from story_spoiler.http.client import StorySpoilerClient
from story_spoiler.logging_setup import configure_logging


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if live_mode_enabled():
        return
    skip_live = pytest.mark.skip(reason="set STORY_SPOILER_LIVE=1 to run against the real service")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture(scope="module")
def spoiler_client():
    configure_logging()
    client = StorySpoilerClient.from_config(load_config())
    yield client
    client.close()


@pytest.fixture(scope="module")
def shared_state() -> dict:
    """Scratch state carried across the ordered tests of one module."""
    return {}
