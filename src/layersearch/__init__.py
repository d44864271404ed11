"""Infrastructure layer search - catalog ranking and layer selection.

Indexes a static catalog of infrastructure data layers, ranks them
against free-text queries, and maintains the ordered set of layers the
user has activated for rendering and export.
"""

from layersearch.catalog import CatalogRecord, CatalogStore
from layersearch.search import MatchResult, normalize, rank
from layersearch.selection import SelectionEntry, SelectionManager, SelectionSet
from layersearch.session import SessionCoordinator, SessionState

__all__ = [
    "CatalogRecord",
    "CatalogStore",
    "MatchResult",
    "SelectionEntry",
    "SelectionManager",
    "SelectionSet",
    "SessionCoordinator",
    "SessionState",
    "normalize",
    "rank",
]
