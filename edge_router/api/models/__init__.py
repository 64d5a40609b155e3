from .catalog import ModelCatalogResponse, ModelDescriptor
from .chat import (
    DEFAULT_MODEL,
    REQUEST_DEFAULTS,
    ChatRequest,
    ChatResponse,
    SummarizeRequest,
    SummarizeResponse,
    TranslateRequest,
    TranslateResponse,
)
from .error import ErrorOutcome, ErrorResponse

__all__ = [
    "DEFAULT_MODEL",
    "REQUEST_DEFAULTS",
    "ErrorResponse",
    "ErrorOutcome",
    "ChatRequest",
    "ChatResponse",
    "TranslateRequest",
    "TranslateResponse",
    "SummarizeRequest",
    "SummarizeResponse",
    "ModelDescriptor",
    "ModelCatalogResponse",
]
