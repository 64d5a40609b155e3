"""
Tests for the chat endpoint.
"""
import pytest

from edge_router.api.endpoints.chat import get_llm_controller
from edge_router.api.models import ChatRequest, ErrorOutcome
from edge_router.controllers.chat_controller import CHAT_FALLBACK, LLMController
from edge_router.services.groq.client import CompletionResult, ProviderFailure

from conftest import USAGE, make_settings


def test_chat_returns_response_model_and_usage(client, fake_client):
    response = client.post("/api/chat", json={"message": "Hello"})

    assert response.status_code == 200
    data = response.json()
    assert data == {"response": "Bonjour", "model": "llama3-8b-8192", "usage": USAGE}


def test_chat_sends_system_prompt_and_parameters(client, fake_client, settings):
    client.post("/api/chat", json={"message": "Hello", "model": "llama3-70b-8192"})

    assert len(fake_client.requests) == 1
    sent = fake_client.requests[0]
    assert sent.model == "llama3-70b-8192"
    assert sent.temperature == 0.7
    assert sent.max_tokens == 1024
    assert [m["role"] for m in sent.messages] == ["system", "user"]
    assert settings.response_language in sent.messages[0]["content"]
    assert sent.messages[1]["content"] == "Hello"


def test_chat_echoes_requested_model(client):
    response = client.post("/api/chat", json={"message": "Hi", "model": "gemma-7b-it"})

    assert response.json()["model"] == "gemma-7b-it"


def test_chat_null_model_uses_default(client):
    response = client.post("/api/chat", json={"message": "Hi", "model": None})

    assert response.status_code == 200
    assert response.json()["model"] == "llama3-8b-8192"


def test_chat_without_message_is_400(client, fake_client):
    response = client.post("/api/chat", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "please provide message content"}
    assert fake_client.requests == []


def test_chat_with_empty_message_is_400(client):
    response = client.post("/api/chat", json={"message": ""})

    assert response.status_code == 400
    assert "error" in response.json()


def test_chat_without_key_is_500(keyless_client, fake_client):
    response = keyless_client.post("/api/chat", json={"message": "Hello"})

    assert response.status_code == 500
    assert response.json() == {"error": "provider key not configured"}
    assert fake_client.requests == []


def test_chat_provider_failure_is_500_with_details(client, fake_client):
    fake_client.outcome = ProviderFailure(message="upstream timed out")

    response = client.post("/api/chat", json={"message": "Hello"})

    assert response.status_code == 500
    assert response.json() == {"error": "service unavailable", "details": "upstream timed out"}


def test_chat_empty_completion_uses_fallback(client, fake_client):
    fake_client.outcome = CompletionResult(content=None, usage=USAGE)

    response = client.post("/api/chat", json={"message": "Hello"})

    assert response.status_code == 200
    assert response.json()["response"] == CHAT_FALLBACK


def test_chat_wrong_method_is_405(client):
    response = client.get("/api/chat")

    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}


def test_chat_invalid_json_is_400(client):
    response = client.post(
        "/api/chat",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "invalid request body"
    assert data["details"]


def test_chat_non_string_message_is_400(client):
    response = client.post("/api/chat", json={"message": ["a", "b"]})

    assert response.status_code == 400
    assert "message" in response.json()["details"]


class ExplodingController:
    async def chat(self, request):
        raise RuntimeError("boom")


def test_unhandled_controller_error_is_500(app, client):
    app.dependency_overrides[get_llm_controller] = lambda: ExplodingController()

    response = client.post("/api/chat", json={"message": "Hello"})

    assert response.status_code == 500
    assert response.json() == {"error": "internal server error", "details": "boom"}
    assert response.headers["access-control-allow-origin"] == "*"


def test_chat_accepts_json_sent_as_text_plain(client, fake_client):
    response = client.post(
        "/api/chat",
        content=b'{"message": "hi"}',
        headers={"Content-Type": "text/plain;charset=UTF-8"},
    )

    assert response.status_code == 200
    assert response.json()["response"] == "Bonjour"
    assert fake_client.requests[0].messages[1]["content"] == "hi"


def test_chat_accepts_json_without_content_type(client):
    response = client.post("/api/chat", content=b'{"message": "hi"}')

    assert response.status_code == 200


def test_chat_empty_body_is_missing_message(client):
    response = client.post("/api/chat", content=b"")

    assert response.status_code == 400
    assert response.json() == {"error": "please provide message content"}


async def test_controller_without_key_never_needs_a_client():
    controller = LLMController(settings=make_settings(GROQ_API_KEY=""), client=None)

    outcome = await controller.chat(ChatRequest.model_validate({"message": "Hello"}))

    assert isinstance(outcome, ErrorOutcome)
    assert outcome.status_code == 500
    assert outcome.error == "provider key not configured"


def test_controller_requires_explicit_client():
    with pytest.raises(TypeError):
        LLMController(settings=make_settings())
