"""
Tests for request parsing and the defaults table.
"""
import pytest
from pydantic import ValidationError

from edge_router.api.models import (
    REQUEST_DEFAULTS,
    ChatRequest,
    SummarizeRequest,
    TranslateRequest,
    TranslateResponse,
)


def test_chat_defaults_model():
    request = ChatRequest.model_validate({"message": "Hello"})

    assert request.model == REQUEST_DEFAULTS["chat"]["model"] == "llama3-8b-8192"


def test_chat_message_is_optional_at_parse_time():
    assert ChatRequest.model_validate({}).message is None


def test_translate_reads_wire_names():
    request = TranslateRequest.model_validate({"text": "Hi", "from": "English", "to": "Japanese"})

    assert request.source_language == "English"
    assert request.target_language == "Japanese"


def test_translate_null_fields_fall_back():
    request = TranslateRequest.model_validate({"text": "Hi", "from": None, "to": None})

    assert request.source_language == "auto"
    assert request.target_language == "Chinese"


def test_summarize_ignores_unknown_fields():
    request = SummarizeRequest.model_validate({"text": "Hi", "model": "gemma-7b-it"})

    assert request.text == "Hi"


def test_non_object_body_is_rejected():
    with pytest.raises(ValidationError):
        ChatRequest.model_validate(["Hello"])


def test_translate_response_dumps_wire_names():
    response = TranslateResponse(
        original="Hi",
        translated="Salut",
        source_language="auto",
        target_language="French",
    )

    dumped = response.model_dump(by_alias=True)
    assert dumped["from"] == "auto"
    assert dumped["to"] == "French"
