"""Active wildfire incidents from the NIFC current-locations service.

The service is an ArcGIS FeatureServer fed by IRWIN; results come back
as GeoJSON points ordered by daily acres, largest first.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

import httpx
from loguru import logger

from layersearch.feeds.http import get_json

NIFC_WILDFIRE_URL = (
    "https://services3.arcgis.com/T4QMspbfLg3qTGWY/arcgis/rest/services/"
    "Current_WildlandFire_Locations/FeatureServer/0/query"
    "?where=1%3D1&outFields=*&f=geojson"
    "&orderByFields=DailyAcres%20DESC&resultRecordCount=50"
)


@dataclass
class Wildfire:
    """An active wildland fire incident."""

    fire_id: str
    name: str
    acres: int
    containment: float
    lat: float
    lng: float
    start_date: str
    cause: str
    status: str


def fetch_active_wildfires(
    url: str = NIFC_WILDFIRE_URL,
    client: httpx.Client | None = None,
    timeout: float = 15.0,
    limit: int = 20,
) -> list[Wildfire]:
    """Fetch the largest active wildfires. Returns [] if unavailable.

    Features that cannot be parsed are skipped with a warning.
    """
    try:
        data = get_json(url, client, timeout)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning(f"Wildfire feed unavailable: {e}")
        return []

    features = data.get("features")
    if not isinstance(features, list):
        features = []

    fires: list[Wildfire] = []
    for index, feature in enumerate(features):
        try:
            fire = _parse_fire(feature)
        except (TypeError, ValueError, AttributeError, KeyError) as e:
            logger.warning(f"Wildfire feature {index} skipped: {e}")
            continue
        if fire is not None:
            fires.append(fire)

    logger.info(f"Wildfire feed: {len(fires)} active fires")
    return fires[:limit]


def _parse_fire(feature: dict) -> Wildfire | None:
    """Build a Wildfire from a GeoJSON point feature; None for other shapes."""
    props = feature.get("properties")
    geometry = feature.get("geometry") or {}
    if not props or geometry.get("type") != "Point":
        return None
    lng, lat = geometry["coordinates"][:2]
    object_id = props.get("OBJECTID")
    acres = float(props.get("DailyAcres") or props.get("CalculatedAcres") or 0)
    return Wildfire(
        fire_id=str(
            props.get("IrwinID")
            or props.get("UniqueFireIdentifier")
            or (object_id if object_id is not None else "unknown")
        ),
        name=props.get("IncidentName") or "Unnamed Fire",
        acres=round(acres),
        containment=float(props.get("PercentContained") or 0),
        lat=float(lat),
        lng=float(lng),
        start_date=(
            props.get("FireDiscoveryDateTime")
            or props.get("CreateDate")
            or datetime.now(timezone.utc).isoformat()
        ),
        cause=props.get("FireCause") or props.get("FireCauseGeneral") or "Unknown",
        status=props.get("Status") or "Active",
    )
