"""
Static catalog of Groq models offered to clients.
"""
from typing import Tuple

from edge_router.api.models.catalog import ModelDescriptor

PROVIDER_NAME = "Groq"

MODEL_CATALOG: Tuple[ModelDescriptor, ...] = (
    ModelDescriptor(
        id="llama3-8b-8192",
        name="Llama 3 8B",
        description="High-quality chat and text generation model",
        context_length=8192,
        recommended=True,
    ),
    ModelDescriptor(
        id="llama3-70b-8192",
        name="Llama 3 70B",
        description="More capable chat and text generation model",
        context_length=8192,
        recommended=False,
    ),
    ModelDescriptor(
        id="mixtral-8x7b-32768",
        name="Mixtral 8x7B",
        description="Efficient mixture-of-experts model",
        context_length=32768,
        recommended=False,
    ),
    ModelDescriptor(
        id="gemma-7b-it",
        name="Gemma 7B",
        description="Google's open chat model",
        context_length=8192,
        recommended=False,
    ),
)
