"""
Request logging middleware.
Logs one JSON line per request and per response.

User text is never written to the log: `message` and `text` are logged by
length, routing fields verbatim, anything else as redacted.
"""
import json
import logging
import time
from typing import Any, Callable, Dict, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

ROUTING_FIELDS = {"model", "from", "to"}
TEXT_FIELDS = {"message", "text"}
REDACTED = "***REDACTED***"


def describe_body(body: Any) -> Dict[str, Any]:
    """Summarize a parsed request body for logging."""
    if not isinstance(body, dict):
        return {"type": type(body).__name__}

    described: Dict[str, Any] = {}
    for key, value in body.items():
        if key in ROUTING_FIELDS:
            described[key] = value
        elif key in TEXT_FIELDS and isinstance(value, str):
            described[f"{key}_length"] = len(value)
        else:
            described[key] = REDACTED
    return described


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests and responses."""

    def __init__(self, app, ignore_paths: tuple = ()):
        super().__init__(app)
        self.ignore_paths = ignore_paths or ("/favicon.ico",)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in self.ignore_paths:
            return await call_next(request)

        start_time = time.time()

        request_log = {
            "type": "request",
            "method": request.method,
            "path": request.url.path,
            "client_ip": self._get_client_ip(request),
        }

        if request.method == "POST":
            body = await self._get_request_body(request)
            if body is not None:
                request_log["body"] = describe_body(body)

        logger.info(json.dumps(request_log, ensure_ascii=False))

        response = await call_next(request)

        process_time = time.time() - start_time

        response_log = {
            "type": "response",
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "process_time_ms": round(process_time * 1000, 2),
        }

        # Log level based on status code
        if response.status_code >= 500:
            logger.error(json.dumps(response_log))
        elif response.status_code >= 400:
            logger.warning(json.dumps(response_log))
        else:
            logger.info(json.dumps(response_log))

        response.headers["X-Process-Time"] = str(process_time)

        return response

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP address, preferring proxy headers."""
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()

        if request.client:
            return request.client.host

        return "unknown"

    async def _get_request_body(self, request: Request) -> Optional[Any]:
        """
        Read and parse the JSON body, caching the bytes on request.state for
        the error handling middleware. Returns None if it cannot be parsed.
        """
        try:
            body_bytes = await request.body()
            request.state.body = body_bytes
            if not body_bytes:
                return None
            return json.loads(body_bytes.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            return None
