"""Selection set of activated layers."""

from layersearch.selection.manager import SelectionEntry, SelectionManager, SelectionSet

__all__ = ["SelectionEntry", "SelectionManager", "SelectionSet"]
