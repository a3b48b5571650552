"""
FastAPI application entrypoint.
Thin layer that wires up routers and middleware.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from aroma_catalog.config.settings import settings
from aroma_catalog.config.logging_config import setup_logging, get_logger
from aroma_catalog.interfaces.api.errors import setup_exception_handlers
from aroma_catalog.interfaces.api.middleware import setup_middleware
from aroma_catalog.interfaces.api.dependencies import init_services
from aroma_catalog.interfaces.api.routers import (
    categories,
    collections,
    display_settings,
    favorites,
    health,
    products,
    search,
)
# Setup logging
setup_logging()
logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
   """Application lifespan manager."""
   logger.info("Initializing services...")
   try:
       init_services()
       logger.info("Services initialized successfully")
   except Exception as e:
       logger.error(f"Service initialization failed: {e}")
       raise
   yield
   logger.info("Shutting down services...")

# Create FastAPI app
app = FastAPI(
   title=settings.api_title,
   description="Essential-oil catalog with fuzzy search and autosuggest",
   version=settings.api_version,
   lifespan=lifespan,
)

# Setup middleware
setup_middleware(app)
setup_exception_handlers(app)
# Register routers; fixed /products/* paths must precede /products/{product_id}
app.include_router(health.router)
app.include_router(search.router, prefix="/api/v1")
app.include_router(categories.router, prefix="/api/v1")
app.include_router(products.router, prefix="/api/v1")
app.include_router(collections.router, prefix="/api/v1")
app.include_router(favorites.router, prefix="/api/v1")
app.include_router(display_settings.router, prefix="/api/v1")
logger.info("Application startup complete")
