"""
Controller for the Groq model catalog.
"""
from edge_router.api.models.catalog import ModelCatalogResponse
from edge_router.services.catalog import MODEL_CATALOG, PROVIDER_NAME


class CatalogController:
    """Serves the static model catalog."""

    def list_models(self) -> ModelCatalogResponse:
        models = list(MODEL_CATALOG)
        return ModelCatalogResponse(
            models=models,
            total=len(models),
            provider=PROVIDER_NAME,
        )
