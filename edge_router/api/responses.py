"""
Conversion of controller outcomes into HTTP responses.

Every JSON error the application emits is built by error_response, so the
envelope is always {"error": ..., "details": ...} with details omitted when
there is nothing to add.
"""
from typing import Dict, Optional, Union

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from edge_router.api.models.error import ErrorOutcome, ErrorResponse


def error_response(
    error: str,
    details: Optional[str] = None,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Build the standard JSON error envelope."""
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def render_outcome(outcome: Union[BaseModel, ErrorOutcome]) -> JSONResponse:
    """
    Render a controller outcome.

    Args:
        outcome: success model or ErrorOutcome

    Returns:
        200 JSON response for success, error envelope with the outcome's
        status otherwise
    """
    if isinstance(outcome, ErrorOutcome):
        return error_response(outcome.error, outcome.details, outcome.status_code)

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=outcome.model_dump(mode="json", by_alias=True),
    )
