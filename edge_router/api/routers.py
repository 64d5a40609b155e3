from fastapi import APIRouter

from .endpoints import catalog
from .endpoints import chat
from .endpoints import home

# Home page (no prefix)
root_router = APIRouter()
root_router.include_router(home.router, prefix="", tags=["home"])

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(chat.router, prefix="", tags=["llm"])
api_router.include_router(catalog.router, prefix="", tags=["models"])
