"""
Shared fixtures: an app wired to fake Groq clients through dependency overrides.
"""
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from edge_router.api.endpoints.chat import get_completion_client
from edge_router.config.settings import Settings, get_settings
from edge_router.services.groq.client import (
    CompletionOutcome,
    CompletionRequest,
    CompletionResult,
)
from main import create_app

USAGE = {"prompt_tokens": 12, "completion_tokens": 5, "total_tokens": 17}


class FakeCompletionClient:
    """Records completion requests and replays a fixed outcome."""

    def __init__(self, outcome: Optional[CompletionOutcome] = None):
        self.outcome = outcome or CompletionResult(content="Bonjour", usage=USAGE)
        self.requests: List[CompletionRequest] = []

    async def complete(self, request: CompletionRequest) -> CompletionOutcome:
        self.requests.append(request)
        return self.outcome


def make_settings(**overrides) -> Settings:
    values = {"GROQ_API_KEY": "test-key", "ENABLE_REQUEST_LOGGING": True}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def fake_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def app(settings, fake_client):
    app = create_app(settings)
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_completion_client] = lambda: fake_client
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def keyless_client(fake_client) -> TestClient:
    settings = make_settings(GROQ_API_KEY="")
    app = create_app(settings)
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_completion_client] = lambda: fake_client
    return TestClient(app)
