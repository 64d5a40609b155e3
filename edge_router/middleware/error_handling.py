"""
Error handling middleware.
Converts any exception escaping a route into the standard JSON error envelope.
"""
import json
import logging
import traceback
from typing import Callable, Optional

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from edge_router.api.responses import error_response

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "internal server error"


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware for centralized error handling and logging."""

    async def _get_request_body(self, request: Request) -> Optional[dict]:
        """
        Return the JSON body cached by the request logging middleware.

        The stream is never read here: by the time a route has failed it
        has already been consumed.
        """
        try:
            body_bytes = getattr(request.state, "body", None)
            if not body_bytes:
                return None

            return json.loads(body_bytes.decode("utf-8"))
        except Exception:
            return None

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except Exception as e:
            body = await self._get_request_body(request)

            logger.error(
                "Unhandled error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "request_body": body,
                    "traceback": traceback.format_exc(),
                },
                exc_info=True,
            )

            return error_response(
                INTERNAL_ERROR,
                details=str(e),
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
