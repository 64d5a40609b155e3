"""
Request and response models for the chat, translate and summarize endpoints.
"""
from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_MODEL = "llama3-8b-8192"

# Fallback values for optional request fields, keyed by route then by the
# field's wire name. Applied when a field is absent or null.
REQUEST_DEFAULTS: Dict[str, Dict[str, str]] = {
    "chat": {"model": DEFAULT_MODEL},
    "translate": {"from": "auto", "to": "Chinese"},
    "summarize": {},
}


class RouteRequest(BaseModel):
    """Base payload that fills optional fields from REQUEST_DEFAULTS."""

    model_config = ConfigDict(protected_namespaces=())

    route: ClassVar[str] = ""

    @model_validator(mode="before")
    @classmethod
    def apply_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        merged = dict(data)
        for key, value in REQUEST_DEFAULTS.get(cls.route, {}).items():
            if merged.get(key) is None:
                merged[key] = value
        return merged


class ChatRequest(RouteRequest):
    """Payload for chat.

    - message: user message forwarded to the model
    - model: Groq model id, defaults to llama3-8b-8192
    """
    route: ClassVar[str] = "chat"

    message: Optional[str] = None
    model: str = DEFAULT_MODEL


class TranslateRequest(RouteRequest):
    """Payload for translation.

    `from` is informational only and never reaches the model.
    """
    route: ClassVar[str] = "translate"

    text: Optional[str] = None
    source_language: str = Field(default="auto", alias="from")
    target_language: str = Field(default="Chinese", alias="to")


class SummarizeRequest(RouteRequest):
    route: ClassVar[str] = "summarize"

    text: Optional[str] = None


class ChatResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    response: str
    model: str
    usage: Optional[Dict[str, Any]] = None


class TranslateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    original: str
    translated: str
    source_language: str = Field(..., alias="from")
    target_language: str = Field(..., alias="to")
    usage: Optional[Dict[str, Any]] = None


class SummarizeResponse(BaseModel):
    original_length: int
    summary: str
    summary_length: int
    usage: Optional[Dict[str, Any]] = None
