"""Catalog lifecycle errors."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog lifecycle failures."""


class EmptyCatalogError(CatalogError):
    """Raised when a catalog load receives zero records."""


class AlreadyLoadedError(CatalogError):
    """Raised when a catalog store is loaded a second time."""


class CatalogNotReadyError(CatalogError):
    """Raised when the catalog is used before a successful load."""


class CatalogParseError(CatalogError):
    """Raised when the tabular catalog source cannot be read."""
