"""
Response models for the model catalog endpoint.
"""
from typing import List

from pydantic import BaseModel, Field


class ModelDescriptor(BaseModel):
    """A Groq model offered to clients."""

    id: str = Field(..., description="Groq model identifier", examples=["llama3-8b-8192"])
    name: str
    description: str
    context_length: int
    recommended: bool


class ModelCatalogResponse(BaseModel):
    models: List[ModelDescriptor]
    total: int
    provider: str
