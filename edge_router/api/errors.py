"""
Router-level exception handlers.

Routing failures (unknown path, wrong method) and malformed request bodies
are reported with the same envelope as controller errors.
"""
import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from edge_router.api.responses import error_response

logger = logging.getLogger(__name__)

NOT_FOUND_ERROR = "404 Not Found"
METHOD_NOT_ALLOWED_ERROR = "Method not allowed"
INVALID_BODY_ERROR = "invalid request body"


def describe_validation_errors(errors: List[Dict[str, Any]]) -> str:
    """Flatten pydantic error dicts into one readable line."""
    parts = []
    for err in errors:
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        message = err.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        error = NOT_FOUND_ERROR
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        error = METHOD_NOT_ALLOWED_ERROR
    else:
        error = str(exc.detail)

    return error_response(
        error,
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = describe_validation_errors(exc.errors())
    logger.warning(
        "Request body validation failed",
        extra={"path": request.url.path, "method": request.method, "errors": details},
    )
    return error_response(
        INVALID_BODY_ERROR,
        details=details,
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
