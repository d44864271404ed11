"""Parse the tabular layer catalog (CSV) into CatalogRecords.

Uses stdlib csv module. Column headers are matched case-insensitively
against a set of aliases so exports with slightly different header text
still load. Only the name column is required.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path

from loguru import logger

from layersearch.catalog.errors import CatalogParseError
from layersearch.catalog.record import CatalogRecord

_COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("name", "layer name", "layer", "title"),
    "agency": ("agency", "source", "provider"),
    "service_endpoint": ("service url", "serviceurl", "url", "service endpoint"),
    "status": ("status",),
    "dua_required": ("dua required", "dua"),
    "gii_required": ("gii required", "gii"),
}

_TRUTHY = {"yes", "y", "true", "1", "x"}


def parse_catalog_csv(csv_string: str) -> list[CatalogRecord]:
    """Parse a CSV string into catalog records, in file order.

    Args:
        csv_string: Raw CSV content with a header row.

    Returns:
        List of CatalogRecord. Rows with a blank name are skipped.

    Raises:
        CatalogParseError: If there is no header row or no name column.
    """
    reader = csv.DictReader(io.StringIO(csv_string))
    if not reader.fieldnames:
        raise CatalogParseError("Catalog CSV has no header row")

    columns = _resolve_columns(reader.fieldnames)
    if "name" not in columns:
        raise CatalogParseError(
            f"Catalog CSV has no name column (headers: {reader.fieldnames})"
        )

    records: list[CatalogRecord] = []
    for line_no, row in enumerate(reader, start=2):
        name = _cell(row, columns, "name")
        if not name:
            logger.warning(f"Catalog row {line_no} has no name, skipped")
            continue
        records.append(
            CatalogRecord(
                name=name,
                agency=_cell(row, columns, "agency") or "Unknown",
                service_endpoint=_cell(row, columns, "service_endpoint") or None,
                status=_cell(row, columns, "status") or "Active",
                dua_required=_flag(_cell(row, columns, "dua_required")),
                gii_required=_flag(_cell(row, columns, "gii_required")),
            )
        )
    return records


def load_catalog_file(path: str | Path) -> list[CatalogRecord]:
    """Read a catalog CSV file from disk.

    Raises:
        CatalogParseError: If the file cannot be read or parsed.
    """
    try:
        content = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogParseError(f"Cannot read catalog file {path}: {e}") from e
    return parse_catalog_csv(content)


def _resolve_columns(fieldnames: list[str]) -> dict[str, str]:
    """Map record field -> actual CSV header."""
    header_map = {h.lower().strip(): h for h in fieldnames if h}
    columns: dict[str, str] = {}
    for field_name, aliases in _COLUMN_ALIASES.items():
        for alias in aliases:
            if alias in header_map:
                columns[field_name] = header_map[alias]
                break
    return columns


def _cell(row: dict, columns: dict[str, str], field_name: str) -> str:
    header = columns.get(field_name)
    if header is None:
        return ""
    return (row.get(header) or "").strip()


def _flag(value: str) -> bool:
    return value.lower() in _TRUTHY
