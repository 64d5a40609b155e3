from typing import Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
    details: Optional[str] = None


class ErrorOutcome(BaseModel):
    """Failure variant returned by controllers.

    Carries the HTTP status alongside the envelope so the endpoint can
    render it without knowing why the operation failed.
    """

    status_code: int
    error: str
    details: Optional[str] = None
