import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from inventory_service import __version__
from inventory_service.config import Settings
from inventory_service.errors import InventoryError
from inventory_service.photo import PhotoStorage
from inventory_service.routes import forms, inventory
from inventory_service.store import InMemoryInventoryStore, InventoryRepository

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[InventoryRepository] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="Inventory Service",
        description="Register inventory items, attach photos and search them",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.store = store if store is not None else InMemoryInventoryStore()
    app.state.photos = PhotoStorage(settings.cache_dir)

    @app.exception_handler(InventoryError)
    async def inventory_error_handler(request: Request, exc: InventoryError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    # Register route modules
    app.include_router(forms.router, tags=["forms"])
    app.include_router(inventory.router, tags=["inventory"])

    logger.info("Photo cache directory: %s", app.state.photos.cache_dir)
    return app
