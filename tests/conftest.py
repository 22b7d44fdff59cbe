from __future__ import annotations

import pytest

from core.config import AppSettings, load_settings
from fake_node import NODE_URL, FakeNode


@pytest.fixture(autouse=True)
def no_env_files(monkeypatch):
    # Keep developer .env files (project or user config) out of the tests.
    monkeypatch.setitem(AppSettings.model_config, "env_file", None)
    for name in (
        "CHAINLINK_URL",
        "CHAINLINK_EMAIL",
        "CHAINLINK_PASSWORD",
        "CHAINLINK_HTTP_TIMEOUT_SECONDS",
        "CHAINLINK_USER_AGENT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    return load_settings(url=NODE_URL)


@pytest.fixture
def node() -> FakeNode:
    return FakeNode()
