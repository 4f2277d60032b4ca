"""Shared fixtures for the console test suite."""

from __future__ import annotations

import os

import pytest

from educonsole.client import ApiClient
from educonsole.console import AdminConsole
from educonsole.tokens import MemoryTokenStore
from tests.fake_api import BASE_URL, FakeApi, RecordingNotifier


# ---------------------------------------------------------------------------
# Keep the developer's environment out of ConsoleSettings
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("EDUCONSOLE_"):
            monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# Component fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def token_store() -> MemoryTokenStore:
    return MemoryTokenStore()


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def api_client(
    fake_api: FakeApi, notifier: RecordingNotifier, token_store: MemoryTokenStore
) -> ApiClient:
    """Client wired to the in-process fake API."""
    return ApiClient(
        base_url=BASE_URL,
        notifier=notifier,
        token_store=token_store,
        transport=fake_api.transport(),
    )


@pytest.fixture
def console(api_client: ApiClient) -> AdminConsole:
    return AdminConsole(api_client)
