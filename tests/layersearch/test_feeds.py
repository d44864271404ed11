"""Tests for the live event feeds - parsing and fail-closed behavior.

All HTTP goes through httpx.MockTransport (no external API calls).
"""

import httpx
import pytest

from layersearch.feeds import (
    category_from_wind,
    fetch_active_hurricanes,
    fetch_active_wildfires,
)

_STORMS = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [-75.2, 28.4]},
            "properties": {
                "STORMID": "al052026",
                "STORMNAME": "Ernesto",
                "STORMTYPE": "HU",
                "MAXWIND": 100,
                "MINPRESSURE": 960,
                "FWDDIR": 315,
                "FWDSPEED": 12,
                "DTG": "2026-09-01T12:00:00Z",
            },
        },
        {"type": "Feature", "geometry": None, "properties": {"STORMNAME": "Ghost"}},
    ],
}

_FIRES = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [-120.5, 39.1]},
            "properties": {
                "IrwinID": "abc-123",
                "IncidentName": "Ridge Fire",
                "DailyAcres": 1520.6,
                "PercentContained": 35,
                "FireDiscoveryDateTime": "2026-08-20T10:00:00Z",
                "FireCause": "Lightning",
            },
        },
        {
            "type": "Feature",
            "geometry": {"type": "Polygon", "coordinates": []},
            "properties": {"IncidentName": "Perimeter"},
        },
        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [-118.0, 34.0]},
            "properties": {"OBJECTID": 7},
        },
    ],
}


def _client(payload=None, status_code=200, raise_error=None):
    """httpx.Client backed by a MockTransport."""
    def handler(request: httpx.Request) -> httpx.Response:
        if raise_error is not None:
            raise raise_error
        if isinstance(payload, (bytes, str)):
            return httpx.Response(status_code, content=payload)
        return httpx.Response(status_code, json=payload)
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestCategoryFromWind:
    """Saffir-Simpson classification from knots."""

    @pytest.mark.parametrize("knots,expected", [
        (140, "Category 5"),
        (115, "Category 4"),
        (100, "Category 3"),
        (85, "Category 2"),
        (65, "Category 1"),
        (35, "Tropical Storm"),
        (30, "Tropical Depression"),
        (0, "Tropical Depression"),
    ])
    def test_categories(self, knots, expected):
        assert category_from_wind(knots) == expected


class TestHurricaneFeed:
    """fetch_active_hurricanes()"""

    def test_parses_storms(self):
        storms = fetch_active_hurricanes("https://nhc.test/storms.json", client=_client(_STORMS))
        assert len(storms) == 1
        s = storms[0]
        assert s.storm_id == "al052026"
        assert s.name == "Ernesto"
        assert s.category == "Category 3"
        assert s.lat == pytest.approx(28.4)
        assert s.lng == pytest.approx(-75.2)
        assert s.pressure == 960

    def test_http_error_returns_empty(self):
        assert fetch_active_hurricanes("https://nhc.test", client=_client({}, 503)) == []

    def test_transport_error_returns_empty(self):
        err = httpx.ConnectError("down")
        assert fetch_active_hurricanes("https://nhc.test", client=_client(raise_error=err)) == []

    def test_malformed_json_returns_empty(self):
        assert fetch_active_hurricanes("https://nhc.test", client=_client(b"<html>")) == []

    def test_no_features(self):
        assert fetch_active_hurricanes("https://nhc.test", client=_client({"type": "x"})) == []

    def test_string_wind_coerced(self):
        payload = {"features": [{
            "geometry": {"type": "Point", "coordinates": [-80.0, 25.0]},
            "properties": {"STORMNAME": "Fay", "MAXWIND": "80", "MINPRESSURE": "985"},
        }]}
        storms = fetch_active_hurricanes("https://nhc.test", client=_client(payload))
        assert len(storms) == 1
        assert storms[0].wind_speed == 80.0
        assert storms[0].category == "Category 1"
        assert storms[0].pressure == 985.0

    def test_null_coordinates_skipped(self):
        payload = {"features": [
            {"geometry": {"type": "Point", "coordinates": [None, None]},
             "properties": {"STORMNAME": "Nowhere"}},
            _STORMS["features"][0],
        ]}
        storms = fetch_active_hurricanes("https://nhc.test", client=_client(payload))
        assert [s.name for s in storms] == ["Ernesto"]

    def test_null_feature_skipped(self):
        payload = {"features": [None, _STORMS["features"][0]]}
        storms = fetch_active_hurricanes("https://nhc.test", client=_client(payload))
        assert [s.name for s in storms] == ["Ernesto"]

    def test_non_numeric_wind_skipped(self):
        payload = {"features": [{
            "geometry": {"type": "Point", "coordinates": [-80.0, 25.0]},
            "properties": {"STORMNAME": "Odd", "MAXWIND": "strong"},
        }]}
        assert fetch_active_hurricanes("https://nhc.test", client=_client(payload)) == []


class TestWildfireFeed:
    """fetch_active_wildfires()"""

    def test_parses_point_fires_only(self):
        fires = fetch_active_wildfires("https://nifc.test", client=_client(_FIRES))
        assert [f.name for f in fires] == ["Ridge Fire", "Unnamed Fire"]
        ridge = fires[0]
        assert ridge.fire_id == "abc-123"
        assert ridge.acres == 1521
        assert ridge.containment == 35
        assert ridge.cause == "Lightning"
        assert ridge.status == "Active"
        assert fires[1].fire_id == "7"

    def test_limit(self):
        fires = fetch_active_wildfires("https://nifc.test", client=_client(_FIRES), limit=1)
        assert len(fires) == 1

    def test_http_error_returns_empty(self):
        assert fetch_active_wildfires("https://nifc.test", client=_client({}, 500)) == []

    def test_non_object_json_returns_empty(self):
        assert fetch_active_wildfires("https://nifc.test", client=_client([1, 2])) == []

    def test_string_acres_coerced(self):
        payload = {"features": [{
            "geometry": {"type": "Point", "coordinates": [-121.0, 38.0]},
            "properties": {"IncidentName": "Creek Fire", "DailyAcres": "1520.6",
                           "PercentContained": "40"},
        }]}
        fires = fetch_active_wildfires("https://nifc.test", client=_client(payload))
        assert len(fires) == 1
        assert fires[0].acres == 1521
        assert fires[0].containment == 40.0

    def test_null_feature_and_coordinates_skipped(self):
        payload = {"features": [
            None,
            {"geometry": {"type": "Point", "coordinates": [None, None]},
             "properties": {"IncidentName": "Lost Fire"}},
            _FIRES["features"][0],
        ]}
        fires = fetch_active_wildfires("https://nifc.test", client=_client(payload))
        assert [f.name for f in fires] == ["Ridge Fire"]

    def test_non_list_features_returns_empty(self):
        payload = {"features": {"not": "a list"}}
        assert fetch_active_wildfires("https://nifc.test", client=_client(payload)) == []
