"""
Shared fixtures for the relay backend tests.

- FakeFrammerClient: records outbound calls, returns a canned payload or raises
- settings/registry/client fixtures wired through create_app()
"""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from backend.config import Settings
from backend.core.registry import JobRegistry
from backend.main import create_app


class FakeFrammerClient:
    def __init__(self, response: dict[str, Any] | None = None, error: Exception | None = None) -> None:
        self.response = response if response is not None else {"data": {"id": 101}}
        self.error = error
        self.calls: list[tuple[dict[str, str], str]] = []

    def process_video(self, payload: dict[str, str], api_key: str) -> dict[str, Any]:
        self.calls.append((dict(payload), api_key))
        if self.error is not None:
            raise self.error
        return self.response


def make_submission(**overrides: Any) -> dict[str, Any]:
    body = {
        "videoUrl": "https://x/a.mp4",
        "language": "en",
        "contentType": "podcast",
        "outputType": "vertical",
    }
    body.update(overrides)
    return body


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    monkeypatch.setenv("FRAMMER_API_KEY", "test-key")
    monkeypatch.delenv("WEBHOOK_URL", raising=False)
    return Settings()


@pytest.fixture
def registry() -> JobRegistry:
    return JobRegistry()


@pytest.fixture
def frammer() -> FakeFrammerClient:
    return FakeFrammerClient()


@pytest.fixture
def client(settings: Settings, registry: JobRegistry, frammer: FakeFrammerClient) -> TestClient:
    app = create_app(settings=settings, registry=registry, client=frammer)
    with TestClient(app) as c:
        yield c
