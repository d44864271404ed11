"""SessionCoordinator - single source of truth for what is shown.

Wires query events to the ranking engine and owns the selection set:
  search(query) -> normalize -> rank -> store latest results
  activate(name) / deactivate(name) -> SelectionManager

State per session:
  IDLE --search()--> SEARCHING --(ranked)--> IDLE

Search is synchronous, so SEARCHING is only observable from inside a
call. Selection changes are independent of search state but require a
loaded catalog.
"""

from __future__ import annotations

import enum
from typing import Callable

from loguru import logger

from layersearch.catalog.errors import CatalogNotReadyError
from layersearch.catalog.record import CatalogRecord
from layersearch.catalog.store import CatalogStore
from layersearch.presets import Preset
from layersearch.search.ranking import MatchResult, rank
from layersearch.search.tokenizer import normalize
from layersearch.selection.manager import SelectionManager, SelectionSet


class SessionState(enum.Enum):
    IDLE = "idle"
    SEARCHING = "searching"


class SessionCoordinator:
    """Search results and layer selection for a single user session."""

    def __init__(
        self,
        store: CatalogStore,
        selection: SelectionManager | None = None,
        predicate: Callable[[CatalogRecord], bool] | None = None,
    ) -> None:
        self._store = store
        self._selection = selection if selection is not None else SelectionManager()
        self._predicate = predicate
        self._results: tuple[MatchResult, ...] = ()
        self._last_query = ""
        self._state = SessionState.IDLE
        self._active_preset: Preset | None = None

    @property
    def store(self) -> CatalogStore:
        return self._store

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def last_query(self) -> str:
        return self._last_query

    @property
    def active_preset(self) -> Preset | None:
        return self._active_preset

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self, query: str) -> list[MatchResult]:
        """Rank the catalog against a query and remember the results.

        Empty and whitespace-only queries yield an empty list.

        Raises:
            CatalogNotReadyError: If the catalog has not been loaded. The
                stored results are reset to empty first.
        """
        self._last_query = query or ""
        if not self._store.is_loaded:
            self._results = ()
            raise CatalogNotReadyError("Search attempted before catalog load")

        self._state = SessionState.SEARCHING
        try:
            tokens = normalize(query)
            results = rank(tokens, self._store.all(), self._predicate)
            self._results = tuple(results)
        finally:
            self._state = SessionState.IDLE
        return list(self._results)

    def current_results(self) -> list[MatchResult]:
        """Snapshot of the latest search results."""
        return list(self._results)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def activate(self, name: str) -> SelectionSet:
        """Add a layer by name. Unknown or unmappable names are no-ops."""
        record = self._lookup(name)
        if record is None:
            logger.debug(f"Activate ignored, unknown layer: {name}")
            return self._selection.snapshot()
        return self._selection.add(record)

    def deactivate(self, name: str) -> SelectionSet:
        """Remove a layer by name. Unknown names are no-ops."""
        self._require_loaded()
        return self._selection.remove(name)

    def clear_selection(self) -> SelectionSet:
        """Drop every active layer and any active preset."""
        self._require_loaded()
        self._active_preset = None
        return self._selection.clear()

    def replace_selection(self, names: list[str]) -> SelectionSet:
        """Replace the selection with the named layers, in order.

        Unknown names are skipped; endpoint and duplicate rules apply
        per element.
        """
        self._require_loaded()
        records = [r for r in (self._lookup(n) for n in names) if r is not None]
        self._active_preset = None
        return self._selection.replace_all(records)

    def current_selection(self) -> SelectionSet:
        """Read-only snapshot of the selection."""
        return self._selection.snapshot()

    # ------------------------------------------------------------------
    # Presets
    # ------------------------------------------------------------------

    def apply_preset(self, preset: Preset, per_term: int | None = None) -> SelectionSet:
        """Seed the selection from a preset's search terms.

        Applying the preset that is already active toggles it off and
        clears the selection. Latest search results are left untouched.
        """
        self._require_loaded()
        if self._active_preset is not None and self._active_preset.name == preset.name:
            logger.info(f"Preset toggled off: {preset.name}")
            return self.clear_selection()

        limit = preset.per_term if per_term is None else per_term
        catalog = self._store.all()
        seeded: list[CatalogRecord] = []
        for term in preset.terms:
            mappable = [
                r.record
                for r in rank(normalize(term), catalog, self._predicate)
                if r.record.addable
            ]
            seeded.extend(mappable[:limit])

        snapshot = self._selection.replace_all(seeded)
        self._active_preset = preset
        logger.info(f"Preset applied: {preset.name} ({len(snapshot)} layers)")
        return snapshot

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _lookup(self, name: str) -> CatalogRecord | None:
        """Find a record in the latest results, then the full catalog."""
        self._require_loaded()
        for result in self._results:
            if result.record.name == name:
                return result.record
        return self._store.get(name)

    def _require_loaded(self) -> None:
        if not self._store.is_loaded:
            raise CatalogNotReadyError("Catalog has not been loaded")
