"""Functional test bootstrap.

Functional tests drive the real `StorySpoilerClient` against the in-process
stub in `spoiler_stub.py` through FastAPI's TestClient, which is an
`httpx.Client`, so no network access is needed. Environment variables that
would steer configuration are cleared for every test.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from spoiler_stub import SpoilerStubState, create_stub_app
from story_spoiler.config import ApiConfig, CredentialsConfig, SuiteConfig
from story_spoiler.http.client import StorySpoilerClient

STUB_USERNAME = "stub-user"
STUB_PASSWORD = "stub-pass"

_CONFIG_ENV = (
    "STORY_SPOILER_BASE_URL",
    "STORY_SPOILER_USERNAME",
    "STORY_SPOILER_PASSWORD",
    "STORY_SPOILER_TIMEOUT",
    "STORY_SPOILER_LIVE",
)


@pytest.fixture(autouse=True)
def _clean_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _CONFIG_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def stub_state() -> SpoilerStubState:
    return SpoilerStubState(STUB_USERNAME, STUB_PASSWORD)


@pytest.fixture
def stub_http(stub_state: SpoilerStubState):
    with TestClient(create_stub_app(stub_state)) as http:
        yield http


@pytest.fixture
def suite_config() -> SuiteConfig:
    return SuiteConfig(
        api=ApiConfig(base_url="http://testserver"),
        credentials=CredentialsConfig(username=STUB_USERNAME, password=STUB_PASSWORD),
    )


@pytest.fixture
def client(suite_config: SuiteConfig, stub_http: TestClient):
    with StorySpoilerClient.from_config(suite_config, http=stub_http) as c:
        yield c
