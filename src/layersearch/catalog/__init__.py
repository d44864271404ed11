"""Layer catalog - immutable records, load-once store, CSV loader."""

from layersearch.catalog.errors import (
    AlreadyLoadedError,
    CatalogError,
    CatalogNotReadyError,
    CatalogParseError,
    EmptyCatalogError,
)
from layersearch.catalog.record import CatalogRecord
from layersearch.catalog.store import CatalogStore

__all__ = [
    "AlreadyLoadedError",
    "CatalogError",
    "CatalogNotReadyError",
    "CatalogParseError",
    "CatalogRecord",
    "CatalogStore",
    "EmptyCatalogError",
]
