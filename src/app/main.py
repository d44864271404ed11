"""HIFLD Layer Search - infrastructure layer discovery service.

Main FastAPI application.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.config import settings
from app.routers import layers_router
from layersearch.catalog import CatalogError, CatalogStore
from layersearch.catalog.parsers.csv_import import load_catalog_file
from layersearch.session import SessionCoordinator


def _load_catalog(store: CatalogStore) -> None:
    """Load the catalog CSV named in settings, if present.

    A missing or unreadable catalog leaves the store unloaded; search
    endpoints then answer 503 until a catalog is posted.
    """
    path = settings.catalog_path
    if path is None or not path.exists():
        logger.warning(f"Catalog file not found: {path} (POST /api/layers/catalog to load)")
        return
    try:
        store.load(load_catalog_file(path))
    except CatalogError as e:
        logger.error(f"Catalog load failed from {path}: {e}")


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("=" * 60)
    logger.info(f"  {settings.app_name} - INITIALIZING")
    logger.info("=" * 60)

    store = CatalogStore()
    _load_catalog(store)
    app.state.session = SessionCoordinator(store)

    logger.info("=" * 60)
    logger.info(f"  {settings.app_name} ONLINE")
    logger.info("=" * 60)

    yield

    logger.info(f"{settings.app_name} shutting down...")


# Create FastAPI app
app = FastAPI(
    title="HIFLD Layer Search",
    description="Search and assemble critical infrastructure map layers",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(layers_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    session = getattr(app.state, "session", None)
    return {
        "status": "operational",
        "version": "0.1.0",
        "catalog_loaded": bool(session and session.store.is_loaded),
    }



def main():
    """Run the API server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
