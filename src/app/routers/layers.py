"""Layer search API - catalog search, layer selection, presets, export.

One SessionCoordinator per process lives on ``app.state.session``
(single active user). Lifecycle errors map to HTTP status codes:
  CatalogNotReadyError -> 503, AlreadyLoadedError -> 409,
  EmptyCatalogError -> 400, unknown preset -> 404.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel

from app.config import settings
from layersearch.catalog import (
    AlreadyLoadedError,
    CatalogNotReadyError,
    CatalogRecord,
    EmptyCatalogError,
)
from layersearch.exporters.map_config import ViewMetadata, build_map_config, export_filename
from layersearch.feeds import fetch_active_hurricanes, fetch_active_wildfires
from layersearch.presets import PRESETS, get_preset
from layersearch.search.ranking import MatchResult
from layersearch.selection.manager import SelectionSet
from layersearch.session import SessionCoordinator

router = APIRouter(prefix="/api/layers", tags=["layers"])


# ---------------------------------------------------------------------------
# Request / Response models
# ---------------------------------------------------------------------------

class CatalogRecordModel(BaseModel):
    """A catalog record as exchanged over the API."""
    name: str
    agency: str = "Unknown"
    serviceUrl: Optional[str] = None
    status: str = "Active"
    duaRequired: bool = False
    giiRequired: bool = False

    def to_record(self) -> CatalogRecord:
        return CatalogRecord(
            name=self.name,
            agency=self.agency,
            service_endpoint=self.serviceUrl or None,
            status=self.status,
            dua_required=self.duaRequired,
            gii_required=self.giiRequired,
        )


class ReplaceSelectionRequest(BaseModel):
    """Replace the selection with these layer names, in order."""
    names: list[str]


class ExportRequest(BaseModel):
    """Map view metadata plus optional document overrides."""
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    extent: Optional[dict] = None
    center: Optional[dict] = None
    zoom: float = 4
    basemap: str = "streets-navigation-vector"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _get_session(request: Request) -> SessionCoordinator:
    """Get the session coordinator from app state."""
    session = getattr(request.app.state, "session", None)
    if session is None:
        raise HTTPException(status_code=503, detail="Session not initialized")
    return session


def _not_ready(e: CatalogNotReadyError) -> HTTPException:
    return HTTPException(status_code=503, detail=f"Catalog not ready: {e}")


def _result_json(result: MatchResult) -> dict:
    return {
        "layer": result.record.to_dict(),
        "score": result.score,
        "matchedFields": list(result.matched_fields),
    }


def _selection_json(selection: SelectionSet) -> dict:
    return {
        "total": len(selection),
        "layers": [
            {**entry.record.to_dict(), "sequence": entry.sequence}
            for entry in selection
        ],
    }


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

@router.get("/catalog")
async def catalog_status(request: Request):
    """Report whether the catalog is loaded and how many layers it holds."""
    session = _get_session(request)
    return {"loaded": session.store.is_loaded, "total": len(session.store)}


@router.post("/catalog")
async def load_catalog(records: list[CatalogRecordModel], request: Request):
    """Load the catalog. Only allowed once per process."""
    session = _get_session(request)
    try:
        session.store.load([r.to_record() for r in records])
    except AlreadyLoadedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except EmptyCatalogError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"loaded": True, "total": len(session.store)}


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

@router.get("/search")
async def search_layers(request: Request, q: str = Query("", description="Free-text query")):
    """Rank catalog layers against a query."""
    session = _get_session(request)
    try:
        results = session.search(q)
    except CatalogNotReadyError as e:
        raise _not_ready(e)
    return {
        "query": q,
        "total": len(results),
        "results": [_result_json(r) for r in results],
    }


@router.get("/results")
async def latest_results(request: Request):
    """Latest search results without re-running the query."""
    session = _get_session(request)
    results = session.current_results()
    return {
        "query": session.last_query,
        "total": len(results),
        "results": [_result_json(r) for r in results],
    }


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

@router.get("/selection")
async def get_selection(request: Request):
    """Active layers in insertion order."""
    return _selection_json(_get_session(request).current_selection())


@router.put("/selection")
async def replace_selection(body: ReplaceSelectionRequest, request: Request):
    """Replace the selection with the named layers."""
    session = _get_session(request)
    try:
        return _selection_json(session.replace_selection(body.names))
    except CatalogNotReadyError as e:
        raise _not_ready(e)


@router.delete("/selection")
async def clear_selection(request: Request):
    """Remove every active layer."""
    session = _get_session(request)
    try:
        return _selection_json(session.clear_selection())
    except CatalogNotReadyError as e:
        raise _not_ready(e)


@router.post("/selection/{name:path}")
async def activate_layer(name: str, request: Request):
    """Activate a layer. Unknown or unmappable layers are ignored."""
    session = _get_session(request)
    try:
        return _selection_json(session.activate(name))
    except CatalogNotReadyError as e:
        raise _not_ready(e)


@router.delete("/selection/{name:path}")
async def deactivate_layer(name: str, request: Request):
    """Deactivate a layer. Unknown layers are ignored."""
    session = _get_session(request)
    try:
        return _selection_json(session.deactivate(name))
    except CatalogNotReadyError as e:
        raise _not_ready(e)


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

@router.get("/presets")
async def list_presets(request: Request):
    """Available emergency presets and which one is active."""
    active = _get_session(request).active_preset
    return [
        {
            "name": p.name,
            "label": p.label,
            "terms": list(p.terms),
            "active": active is not None and active.name == p.name,
        }
        for p in PRESETS.values()
    ]


@router.post("/presets/{preset_name}")
async def apply_preset(preset_name: str, request: Request):
    """Apply (or toggle off) a preset and fetch its live events.

    The selection change runs on the event loop with every other
    selection write. Only the blocking feed fetch goes to the threadpool.
    """
    session = _get_session(request)
    preset = get_preset(preset_name)
    if preset is None:
        raise HTTPException(status_code=404, detail=f"Preset '{preset_name}' not found")

    try:
        selection = session.apply_preset(preset, per_term=settings.preset_layers_per_term)
    except CatalogNotReadyError as e:
        raise _not_ready(e)

    active = session.active_preset is not None
    events: list[dict] = []
    if active and settings.feeds_enabled:
        events = await run_in_threadpool(_fetch_events, preset.name)

    return {
        "preset": preset.name,
        "active": active,
        "events": events,
        "selection": _selection_json(selection),
    }


def _fetch_events(preset_name: str) -> list[dict]:
    """Live events matching a preset; [] when the feed is down."""
    if preset_name == "hurricane":
        storms = fetch_active_hurricanes(
            settings.hurricane_feed_url, timeout=settings.feed_timeout,
        )
        return [asdict(s) for s in storms]
    if preset_name == "wildfire":
        fires = fetch_active_wildfires(
            settings.wildfire_feed_url,
            timeout=settings.feed_timeout,
            limit=settings.wildfire_limit,
        )
        return [asdict(f) for f in fires]
    return []


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------

@router.post("/export")
async def export_map(body: ExportRequest, request: Request):
    """Export the selection as a downloadable map configuration."""
    selection = _get_session(request).current_selection()
    if not len(selection):
        raise HTTPException(status_code=400, detail="No layers to export")

    view = ViewMetadata(
        extent=body.extent, center=body.center, zoom=body.zoom, basemap=body.basemap,
    )
    config = build_map_config(
        selection, view,
        title=body.title, description=body.description, tags=body.tags,
    )
    filename = export_filename(selection)
    logger.info(f"Exported map config: {filename} ({len(selection)} layers)")
    return JSONResponse(
        content=config,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
