"""Shared fixtures for layersearch tests."""

from __future__ import annotations

import pytest

from layersearch.catalog import CatalogRecord, CatalogStore
from layersearch.session import SessionCoordinator


def make_record(name, agency="Unknown", endpoint="https://services.example.com/MapServer", **kw):
    """Build a CatalogRecord with a mappable endpoint by default."""
    return CatalogRecord(name=name, agency=agency, service_endpoint=endpoint, **kw)


@pytest.fixture
def scenario_records():
    """Two hospitals (one unmappable) and a fire station."""
    return [
        CatalogRecord("Hospital A", "HHS", "http://x"),
        CatalogRecord("Hospital B", "HHS", None),
        CatalogRecord("Fire Station 1", "DHS", "http://y"),
    ]


@pytest.fixture
def infra_records():
    """A small catalog spanning the preset search terms."""
    return [
        make_record("Hospitals", "HHS"),
        make_record("Urgent Care Facilities", "HHS"),
        make_record("Emergency Medical Service Stations", "DHS"),
        make_record("Fire Stations", "DHS"),
        make_record("Fire Hydrants", "Local"),
        make_record("Power Plants", "EIA"),
        make_record("Electric Substations", "EIA", endpoint=None),
        make_record("Airports", "FAA"),
        make_record("Heliports and Helipads", "FAA"),
        make_record("National Shelter System Facilities", "FEMA"),
        make_record("Hurricane Evacuation Routes", "DOT"),
        make_record("Public Water Systems", "EPA"),
        make_record("Wastewater Treatment Plants", "EPA"),
        make_record("Police Stations", "DOJ", status="Migrated"),
    ]


@pytest.fixture
def scenario_store(scenario_records):
    store = CatalogStore()
    store.load(scenario_records)
    return store


@pytest.fixture
def infra_store(infra_records):
    store = CatalogStore()
    store.load(infra_records)
    return store


@pytest.fixture
def session(scenario_store):
    return SessionCoordinator(scenario_store)


@pytest.fixture
def infra_session(infra_store):
    return SessionCoordinator(infra_store)
