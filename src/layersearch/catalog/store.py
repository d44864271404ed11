"""CatalogStore - load-once holder of the immutable layer catalog.

Lifecycle:
  CatalogStore() -> load(records) -> [ready] -> all() / get(name)

A second load() raises AlreadyLoadedError; the store must be recreated
to pick up a new catalog.
"""

from __future__ import annotations

from typing import Iterable

from loguru import logger

from layersearch.catalog.errors import (
    AlreadyLoadedError,
    CatalogNotReadyError,
    EmptyCatalogError,
)
from layersearch.catalog.record import CatalogRecord


class CatalogStore:
    """Immutable catalog of layer records, keyed by name."""

    def __init__(self) -> None:
        self._records: dict[str, CatalogRecord] = {}
        self._ordered: tuple[CatalogRecord, ...] = ()
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load(self, records: Iterable[CatalogRecord]) -> None:
        """Load the catalog. Must be called exactly once.

        Duplicate names resolve to the last record in input order; the
        surviving record keeps the position where the name first appeared.

        Raises:
            AlreadyLoadedError: If the store was already loaded.
            EmptyCatalogError: If ``records`` is empty.
        """
        if self._loaded:
            raise AlreadyLoadedError(
                f"Catalog already loaded ({len(self._records)} records)"
            )

        by_name: dict[str, CatalogRecord] = {}
        for record in records:
            if record.name in by_name:
                logger.warning(f"Duplicate catalog name, keeping last: {record.name}")
            by_name[record.name] = record

        if not by_name:
            raise EmptyCatalogError("Catalog load received zero records")

        self._records = by_name
        self._ordered = tuple(by_name.values())
        self._loaded = True
        logger.info(f"Catalog loaded: {len(self._ordered)} layers")

    def all(self) -> tuple[CatalogRecord, ...]:
        """Return every record in load order.

        Raises:
            CatalogNotReadyError: If load() has not succeeded yet.
        """
        self._require_loaded()
        return self._ordered

    def get(self, name: str) -> CatalogRecord | None:
        """Look up a record by exact name, or None if unknown."""
        self._require_loaded()
        return self._records.get(name)

    def __len__(self) -> int:
        return len(self._ordered)

    def _require_loaded(self) -> None:
        if not self._loaded:
            raise CatalogNotReadyError("Catalog has not been loaded")
