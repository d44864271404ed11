"""Active tropical storms from the National Hurricane Center.

Reads the NHC active-storms GeoJSON feed. Fails closed: any HTTP or
parse failure is logged and yields an empty list.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

import httpx
from loguru import logger

from layersearch.feeds.http import get_json

NHC_ACTIVE_STORMS_URL = "https://www.nhc.noaa.gov/gis/json/ACTIVE_STORMS.json"

_KNOTS_TO_MPH = 1.15078

# (minimum sustained wind in mph, category label), strongest first
_SAFFIR_SIMPSON = [
    (157, "Category 5"),
    (130, "Category 4"),
    (111, "Category 3"),
    (96, "Category 2"),
    (74, "Category 1"),
    (39, "Tropical Storm"),
]


@dataclass
class Storm:
    """An active tropical cyclone position report."""

    storm_id: str
    name: str
    status: str
    category: str
    lat: float
    lng: float
    wind_speed: float
    pressure: float
    movement_dir: float
    movement_speed: float
    timestamp: str


def category_from_wind(wind_knots: float) -> str:
    """Classify max sustained wind (knots) on the Saffir-Simpson scale."""
    wind_mph = wind_knots * _KNOTS_TO_MPH
    for threshold, label in _SAFFIR_SIMPSON:
        if wind_mph >= threshold:
            return label
    return "Tropical Depression"


def fetch_active_hurricanes(
    url: str = NHC_ACTIVE_STORMS_URL,
    client: httpx.Client | None = None,
    timeout: float = 15.0,
) -> list[Storm]:
    """Fetch active storms. Returns [] if the feed is unavailable.

    Features that cannot be parsed are skipped with a warning.
    """
    try:
        data = get_json(url, client, timeout)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning(f"Hurricane feed unavailable: {e}")
        return []

    features = data.get("features")
    if not isinstance(features, list):
        features = []

    storms: list[Storm] = []
    for index, feature in enumerate(features):
        try:
            storm = _parse_storm(feature)
        except (TypeError, ValueError, AttributeError, KeyError) as e:
            logger.warning(f"Hurricane feature {index} skipped: {e}")
            continue
        if storm is not None:
            storms.append(storm)

    logger.info(f"Hurricane feed: {len(storms)} active storms")
    return storms


def _parse_storm(feature: dict) -> Storm | None:
    """Build a Storm from a GeoJSON feature; None if it has no position."""
    props = feature.get("properties")
    geometry = feature.get("geometry")
    if not props or not geometry:
        return None
    lng, lat = geometry["coordinates"][:2]
    wind = float(props.get("MAXWIND") or 0)
    return Storm(
        storm_id=str(props.get("STORMID") or props.get("id") or ""),
        name=props.get("STORMNAME") or props.get("name") or "Unknown",
        status=props.get("STORMTYPE") or "Disturbance",
        category=category_from_wind(wind),
        lat=float(lat),
        lng=float(lng),
        wind_speed=wind,
        pressure=float(props.get("MINPRESSURE") or 0),
        movement_dir=float(props.get("FWDDIR") or 0),
        movement_speed=float(props.get("FWDSPEED") or 0),
        timestamp=props.get("DTG") or datetime.now(timezone.utc).isoformat(),
    )
