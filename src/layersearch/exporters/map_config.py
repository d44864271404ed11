"""Export the active selection as a portable map configuration document.

The document pairs the selected layers with view metadata (extent,
center, zoom, basemap) supplied by the rendering surface. Title,
description, and tags default to values derived from the selection.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone

from layersearch.selection.manager import SelectionSet

CONFIG_VERSION = "1.0"
DEFAULT_BASEMAP = "streets-navigation-vector"
DEFAULT_ZOOM = 4
MAX_TAGS = 10

_BASE_TAGS = ("HIFLD", "Infrastructure")
_NAME_KEYWORDS = (
    "Fire", "Hospital", "School", "Emergency", "Police",
    "Water", "Power", "Airport", "EMS",
)


@dataclass
class ViewMetadata:
    """Map view state supplied by the rendering surface.

    Attributes:
        extent: {"xmin", "ymin", "xmax", "ymax", "spatialReference"} or None.
        center: {"longitude", "latitude"} or None.
        zoom: Zoom level.
        basemap: Basemap identifier.
    """

    extent: dict | None = None
    center: dict | None = None
    zoom: float = DEFAULT_ZOOM
    basemap: str = DEFAULT_BASEMAP


def default_title(selection: SelectionSet) -> str:
    names = selection.names()
    more = f" + {len(names) - 1} more" if len(names) > 1 else ""
    return f"HIFLD Map: {names[0]}{more}"


def default_description(selection: SelectionSet) -> str:
    names = selection.names()
    listed = ", ".join(names[:3])
    more = f", and {len(names) - 3} more layers" if len(names) > 3 else ""
    agencies = ", ".join(dict.fromkeys(r.agency for r in selection.records()))
    return (
        f"This map contains HIFLD infrastructure data including: {listed}{more}. "
        f"Data sources: {agencies}."
    )


def default_tags(selection: SelectionSet) -> list[str]:
    """Base tags, then provider agencies, then keywords found in layer names."""
    tags: dict[str, None] = dict.fromkeys(_BASE_TAGS)
    records = selection.records()
    for record in records:
        if record.agency and record.agency != "Unknown":
            tags.setdefault(record.agency, None)
    for record in records:
        lowered = record.name.lower()
        for keyword in _NAME_KEYWORDS:
            if keyword.lower() in lowered:
                tags.setdefault(keyword, None)
    return list(tags)[:MAX_TAGS]


def build_map_config(
    selection: SelectionSet,
    view: ViewMetadata | None = None,
    title: str | None = None,
    description: str | None = None,
    tags: list[str] | None = None,
    exported_at: datetime | None = None,
) -> dict:
    """Build the map configuration dict for a selection.

    Raises:
        ValueError: If the selection is empty.
    """
    if not len(selection):
        raise ValueError("No layers to export")

    view = view or ViewMetadata()
    exported_at = exported_at or datetime.now(timezone.utc)
    return {
        "title": title or default_title(selection),
        "description": description or default_description(selection),
        "tags": list(tags) if tags else default_tags(selection),
        "layers": [r.to_dict() for r in selection.records()],
        "extent": view.extent,
        "center": view.center,
        "zoom": view.zoom or DEFAULT_ZOOM,
        "basemap": view.basemap or DEFAULT_BASEMAP,
        "exportDate": exported_at.isoformat(),
        "version": CONFIG_VERSION,
    }


def export_filename(selection: SelectionSet, on: date | None = None) -> str:
    """Download filename: HIFLD_Map_<primary layer>_<YYYY-MM-DD>.json"""
    if not len(selection):
        raise ValueError("No layers to export")
    on = on or datetime.now(timezone.utc).date()
    primary = re.sub(r"[^a-z0-9]", "_", selection.names()[0], flags=re.IGNORECASE)[:30]
    return f"HIFLD_Map_{primary}_{on.isoformat()}.json"
