"""
Model catalog endpoint.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from edge_router.api.responses import render_outcome
from edge_router.controllers.catalog_controller import CatalogController

ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


def get_catalog_controller() -> CatalogController:
    """Dependency injection for CatalogController."""
    return CatalogController()


router = APIRouter()


@router.api_route("/models", methods=ANY_METHOD)
async def list_models(
    controller: CatalogController = Depends(get_catalog_controller),
) -> JSONResponse:
    """List the Groq models clients may pass to /api/chat."""
    return render_outcome(controller.list_models())
