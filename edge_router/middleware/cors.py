"""
CORS middleware.
Answers preflight requests and stamps the CORS header set on every response.
"""
from typing import Callable

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware applying a fixed, permissive CORS policy."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # OPTIONS never reaches the router, whatever the path
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
