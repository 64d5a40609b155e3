"""
Home page endpoint.
"""
from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from edge_router.api.endpoints.catalog import ANY_METHOD
from edge_router.pages.home import HOME_PAGE_HTML

router = APIRouter()


@router.api_route("/", methods=ANY_METHOD, response_class=HTMLResponse)
async def home() -> HTMLResponse:
    """Describe the available API endpoints."""
    return HTMLResponse(content=HOME_PAGE_HTML)
