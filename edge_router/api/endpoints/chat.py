"""
LLM endpoints.

Chat, translation and summarization backed by Groq chat completions.
"""
import json
from typing import Callable, Optional, Type, TypeVar

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from edge_router.api.models import (
    ChatRequest,
    ErrorResponse,
    SummarizeRequest,
    TranslateRequest,
)
from edge_router.api.models.chat import RouteRequest
from edge_router.api.responses import render_outcome
from edge_router.config.settings import Settings, get_settings
from edge_router.controllers.chat_controller import LLMController
from edge_router.services.groq.client import GroqCompletionClient

RequestT = TypeVar("RequestT", bound=RouteRequest)

# ============================================================================
# Dependency Injection
# ============================================================================


def get_completion_client(
    settings: Settings = Depends(get_settings),
) -> Optional[GroqCompletionClient]:
    """Groq client for this request, or None when no key is configured."""
    if not settings.has_provider_key:
        return None
    return GroqCompletionClient(
        api_key=settings.groq_api_key,
        base_url=settings.groq_base_url,
    )


def get_llm_controller(
    settings: Settings = Depends(get_settings),
    client: Optional[GroqCompletionClient] = Depends(get_completion_client),
) -> LLMController:
    """Dependency injection for LLMController."""
    return LLMController(settings=settings, client=client)


def json_body(model: Type[RequestT]) -> Callable:
    """
    Build a dependency that parses the raw body as JSON into `model`.

    Content-Type is ignored: browsers posting JSON without an explicit
    header send text/plain. An empty body parses as an empty object.
    """

    async def parse(request: Request) -> RequestT:
        raw = await request.body()
        try:
            data = json.loads(raw) if raw.strip() else {}
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise RequestValidationError(
                [{"type": "json_invalid", "loc": ("body",), "msg": f"JSON decode error: {e}"}]
            )

        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise RequestValidationError(e.errors())

    return parse


# ============================================================================
# Router
# ============================================================================

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing required field or malformed body"},
    405: {"model": ErrorResponse, "description": "Method not allowed"},
    500: {"model": ErrorResponse, "description": "Provider key missing or provider unavailable"},
}


# ============================================================================
# Endpoints
# ============================================================================


@router.post("/chat", status_code=status.HTTP_200_OK, responses=ERROR_RESPONSES)
async def chat(
    request: ChatRequest = Depends(json_body(ChatRequest)),
    controller: LLMController = Depends(get_llm_controller),
) -> JSONResponse:
    """
    Chat endpoint.

    Sends the message to the requested Groq model (llama3-8b-8192 by
    default) and returns the reply with the model name and token usage.
    """
    return render_outcome(await controller.chat(request))


@router.post("/translate", status_code=status.HTTP_200_OK, responses=ERROR_RESPONSES)
async def translate(
    request: TranslateRequest = Depends(json_body(TranslateRequest)),
    controller: LLMController = Depends(get_llm_controller),
) -> JSONResponse:
    """
    Translate text into `to` (Chinese by default).

    `from` is echoed back as given, defaulting to "auto".
    """
    return render_outcome(await controller.translate(request))


@router.post("/summarize", status_code=status.HTTP_200_OK, responses=ERROR_RESPONSES)
async def summarize(
    request: SummarizeRequest = Depends(json_body(SummarizeRequest)),
    controller: LLMController = Depends(get_llm_controller),
) -> JSONResponse:
    """Summarize text and report original and summary lengths."""
    return render_outcome(await controller.summarize(request))
