"""Tests for CatalogStore - load-once lifecycle, lookups, duplicate names."""

import pytest

from layersearch.catalog import (
    AlreadyLoadedError,
    CatalogError,
    CatalogNotReadyError,
    CatalogRecord,
    CatalogStore,
    EmptyCatalogError,
)


class TestCatalogRecord:
    """CatalogRecord defaults and serialization."""

    def test_defaults(self):
        """A bare record is unmappable, active, and ungated."""
        r = CatalogRecord("Dams")
        assert r.agency == "Unknown"
        assert r.service_endpoint is None
        assert r.status == "Active"
        assert r.dua_required is False
        assert r.gii_required is False
        assert r.addable is False

    def test_empty_endpoint_not_addable(self):
        assert CatalogRecord("Dams", service_endpoint="").addable is False

    def test_record_is_immutable(self):
        r = CatalogRecord("Dams")
        with pytest.raises(AttributeError):
            r.name = "Levees"

    def test_to_dict_uses_export_field_names(self):
        r = CatalogRecord("Dams", "USACE", "http://d", "Migrated", True, False)
        assert r.to_dict() == {
            "name": "Dams",
            "agency": "USACE",
            "serviceUrl": "http://d",
            "status": "Migrated",
            "duaRequired": True,
            "giiRequired": False,
        }


class TestCatalogStore:
    """CatalogStore load/all/get operations."""

    def test_load_and_all(self, scenario_records):
        """all() returns records in load order."""
        store = CatalogStore()
        assert store.is_loaded is False
        store.load(scenario_records)
        assert store.is_loaded is True
        assert [r.name for r in store.all()] == ["Hospital A", "Hospital B", "Fire Station 1"]
        assert len(store) == 3

    def test_get_by_name(self, scenario_store):
        assert scenario_store.get("Hospital B").agency == "HHS"
        assert scenario_store.get("hospital b") is None
        assert scenario_store.get("Nope") is None

    def test_empty_load_raises(self):
        store = CatalogStore()
        with pytest.raises(EmptyCatalogError):
            store.load([])
        assert store.is_loaded is False

    def test_second_load_raises_and_keeps_first(self, scenario_store):
        """Re-load is rejected and the original catalog is untouched."""
        before = scenario_store.all()
        with pytest.raises(AlreadyLoadedError):
            scenario_store.load([CatalogRecord("Other", "X", "http://z")])
        assert scenario_store.all() == before
        assert scenario_store.get("Other") is None

    def test_use_before_load_raises(self):
        store = CatalogStore()
        with pytest.raises(CatalogNotReadyError):
            store.all()
        with pytest.raises(CatalogNotReadyError):
            store.get("Hospital A")

    def test_errors_share_base_class(self):
        for err in (EmptyCatalogError, AlreadyLoadedError, CatalogNotReadyError):
            assert issubclass(err, CatalogError)

    def test_duplicate_names_last_wins(self):
        """Last duplicate wins; it keeps the first occurrence's position."""
        store = CatalogStore()
        store.load([
            CatalogRecord("Dams", "Old", None),
            CatalogRecord("Levees", "USACE", "http://l"),
            CatalogRecord("Dams", "New", "http://d"),
        ])
        assert len(store) == 2
        assert [r.name for r in store.all()] == ["Dams", "Levees"]
        assert store.get("Dams").agency == "New"
        assert store.get("Dams").service_endpoint == "http://d"

    def test_load_accepts_generator(self):
        store = CatalogStore()
        store.load(CatalogRecord(f"Layer {i}") for i in range(3))
        assert len(store) == 3
