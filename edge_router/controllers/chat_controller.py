"""
LLM controller for chat, translation and summarization.

Each operation validates its payload, checks that a Groq key is configured,
makes one completion call and shapes the result. Failures are returned as
ErrorOutcome values rather than raised.
"""
import logging
from typing import Optional, Union

from fastapi import status

from edge_router.api.models import (
    DEFAULT_MODEL,
    ChatRequest,
    ChatResponse,
    ErrorOutcome,
    SummarizeRequest,
    SummarizeResponse,
    TranslateRequest,
    TranslateResponse,
)
from edge_router.config.settings import Settings
from edge_router.services.groq.client import (
    CompletionRequest,
    GroqCompletionClient,
    ProviderFailure,
)
from edge_router.services.prompts import (
    build_chat_system_prompt,
    build_summarize_prompt,
    build_translate_prompt,
)

logger = logging.getLogger(__name__)

CHAT_TEMPERATURE = 0.7
CHAT_MAX_TOKENS = 1024
TRANSLATE_TEMPERATURE = 0.3
TRANSLATE_MAX_TOKENS = 1024
SUMMARIZE_TEMPERATURE = 0.3
SUMMARIZE_MAX_TOKENS = 512

CHAT_FALLBACK = "unable to generate a response"
TRANSLATE_FALLBACK = "translation failed"
SUMMARY_FALLBACK = "summary generation failed"

MISSING_KEY_ERROR = "provider key not configured"


class LLMController:
    """Controller for Groq-backed text operations."""

    def __init__(self, settings: Settings, client: Optional[GroqCompletionClient]):
        """
        Args:
            settings: Application settings carrying the Groq credential
            client: Completion client, None only when no key is configured
        """
        self.settings = settings
        self.client = client

    def _precheck(self, value: Optional[str], missing_error: str) -> Optional[ErrorOutcome]:
        """
        Validate the required field, then the credential.

        Returns:
            ErrorOutcome for the first failed check, None when both pass
        """
        if not value:
            return ErrorOutcome(status_code=status.HTTP_400_BAD_REQUEST, error=missing_error)

        if not self.settings.has_provider_key:
            logger.error("GROQ_API_KEY is not configured")
            return ErrorOutcome(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                error=MISSING_KEY_ERROR,
            )

        return None

    async def chat(self, request: ChatRequest) -> Union[ChatResponse, ErrorOutcome]:
        """
        Answer a single user message.

        Args:
            request: ChatRequest with message and model

        Returns:
            ChatResponse with the reply, model and usage, or ErrorOutcome
        """
        failure = self._precheck(request.message, "please provide message content")
        if failure is not None:
            return failure

        outcome = await self.client.complete(
            CompletionRequest(
                messages=[
                    {
                        "role": "system",
                        "content": build_chat_system_prompt(self.settings.response_language),
                    },
                    {"role": "user", "content": request.message},
                ],
                model=request.model,
                temperature=CHAT_TEMPERATURE,
                max_tokens=CHAT_MAX_TOKENS,
            )
        )
        if isinstance(outcome, ProviderFailure):
            return ErrorOutcome(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                error="service unavailable",
                details=outcome.message,
            )

        return ChatResponse(
            response=outcome.content or CHAT_FALLBACK,
            model=request.model,
            usage=outcome.usage,
        )

    async def translate(self, request: TranslateRequest) -> Union[TranslateResponse, ErrorOutcome]:
        """
        Translate text into the target language.

        The source language is echoed back but never sent to the model.
        """
        failure = self._precheck(request.text, "please provide text to translate")
        if failure is not None:
            return failure

        outcome = await self.client.complete(
            CompletionRequest(
                messages=[
                    {
                        "role": "user",
                        "content": build_translate_prompt(request.text, request.target_language),
                    }
                ],
                model=DEFAULT_MODEL,
                temperature=TRANSLATE_TEMPERATURE,
                max_tokens=TRANSLATE_MAX_TOKENS,
            )
        )
        if isinstance(outcome, ProviderFailure):
            return ErrorOutcome(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                error="translation service unavailable",
                details=outcome.message,
            )

        translated = (outcome.content or "").strip() or TRANSLATE_FALLBACK
        return TranslateResponse(
            original=request.text,
            translated=translated,
            source_language=request.source_language,
            target_language=request.target_language,
            usage=outcome.usage,
        )

    async def summarize(self, request: SummarizeRequest) -> Union[SummarizeResponse, ErrorOutcome]:
        failure = self._precheck(request.text, "please provide text to summarize")
        if failure is not None:
            return failure

        outcome = await self.client.complete(
            CompletionRequest(
                messages=[
                    {
                        "role": "user",
                        "content": build_summarize_prompt(
                            request.text, self.settings.response_language
                        ),
                    }
                ],
                model=DEFAULT_MODEL,
                temperature=SUMMARIZE_TEMPERATURE,
                max_tokens=SUMMARIZE_MAX_TOKENS,
            )
        )
        if isinstance(outcome, ProviderFailure):
            return ErrorOutcome(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                error="summarization service unavailable",
                details=outcome.message,
            )

        summary = (outcome.content or "").strip() or SUMMARY_FALLBACK
        return SummarizeResponse(
            original_length=len(request.text),
            summary=summary,
            summary_length=len(summary),
            usage=outcome.usage,
        )
