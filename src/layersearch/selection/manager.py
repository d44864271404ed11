"""SelectionManager - ordered, de-duplicated set of activated layers.

Every mutation returns an immutable SelectionSet snapshot. Consumers
(map renderer, exporter) only ever see snapshots, never the live state.

Invariants:
  - at most one entry per record name
  - entries are ordered by insertion; remove + re-add moves to the end
  - records without a service endpoint are never added
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from layersearch.catalog.record import CatalogRecord


@dataclass(frozen=True)
class SelectionEntry:
    """An activated catalog record.

    Attributes:
        record: The activated CatalogRecord.
        sequence: Monotonic insertion number, unique per manager.
    """

    record: CatalogRecord
    sequence: int

    @property
    def name(self) -> str:
        return self.record.name


@dataclass(frozen=True)
class SelectionSet:
    """Read-only snapshot of the selection, in insertion order."""

    entries: tuple[SelectionEntry, ...] = ()

    def names(self) -> list[str]:
        return [e.name for e in self.entries]

    def records(self) -> list[CatalogRecord]:
        return [e.record for e in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[SelectionEntry]:
        return iter(self.entries)

    def __contains__(self, name: object) -> bool:
        return any(e.name == name for e in self.entries)


class SelectionManager:
    """Registry of activated layers keyed by name."""

    def __init__(self) -> None:
        self._entries: dict[str, SelectionEntry] = {}
        self._next_sequence = 1

    def add(self, record: CatalogRecord) -> SelectionSet:
        """Activate a record.

        No-op if the record has no service endpoint or a record with the
        same name is already selected.
        """
        if record.addable and record.name not in self._entries:
            self._entries[record.name] = SelectionEntry(record, self._next_sequence)
            self._next_sequence += 1
        return self.snapshot()

    def remove(self, name: str) -> SelectionSet:
        """Deactivate a record by name. Removing a non-member is a no-op."""
        self._entries.pop(name, None)
        return self.snapshot()

    def clear(self) -> SelectionSet:
        """Remove every entry. Sequence numbers keep counting."""
        self._entries.clear()
        return self.snapshot()

    def replace_all(self, records: Iterable[CatalogRecord]) -> SelectionSet:
        """Clear, then add each record in order with the add() rules."""
        self._entries.clear()
        for record in records:
            self.add(record)
        return self.snapshot()

    def snapshot(self) -> SelectionSet:
        """Return the current selection without changing it."""
        return SelectionSet(tuple(self._entries.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
