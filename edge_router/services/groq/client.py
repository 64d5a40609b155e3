"""
Groq completion client.

Talks to Groq through its OpenAI-compatible endpoint using the OpenAI SDK.
Provider failures are returned as ProviderFailure values instead of being
raised, so controllers decide how each failure is reported.
"""
import logging
from typing import Any, Dict, List, Optional, Union

from openai import AsyncOpenAI
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class CompletionRequest(BaseModel):
    """Parameters for a single chat completion call."""

    messages: List[Dict[str, str]]  # [{role: "system" | "user", content: str}]
    model: str
    temperature: float
    max_tokens: int


class CompletionResult(BaseModel):
    """Successful completion: first choice text and opaque usage record."""

    content: Optional[str] = None
    usage: Optional[Dict[str, Any]] = None


class ProviderFailure(BaseModel):
    """Provider call failed; message is passed through to the caller."""

    message: str


CompletionOutcome = Union[CompletionResult, ProviderFailure]


class GroqCompletionClient:
    """Async client for Groq chat completions."""

    def __init__(self, api_key: str, base_url: str):
        # No SDK-level retries; each request makes exactly one provider call.
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)

    async def complete(self, request: CompletionRequest) -> CompletionOutcome:
        """
        Run one chat completion.

        Args:
            request: messages, model and sampling parameters

        Returns:
            CompletionResult on success, ProviderFailure if the call failed
        """
        try:
            completion = await self.client.chat.completions.create(
                model=request.model,
                messages=request.messages,
                temperature=request.temperature,
                max_tokens=request.max_tokens,
            )
            content = None
            if completion.choices:
                message = completion.choices[0].message
                content = message.content if message is not None else None

            usage = completion.usage
            if usage is not None and hasattr(usage, "model_dump"):
                usage = usage.model_dump(exclude_unset=True)
        except Exception as e:
            logger.error(f"Groq completion failed for model {request.model}: {e}")
            return ProviderFailure(message=str(e))

        return CompletionResult(content=content, usage=usage)
