#!/usr/bin/env python3
"""Tests for YAML loading and saving utilities."""

from datetime import date

import pytest
import yaml

from models import (
    load_logbook,
    create_logbook,
    save_fuel_entry,
    delete_fuel_entry,
    save_maintenance_event,
    delete_maintenance_event,
    FuelType,
    ServiceType,
    RawFuelEntry,
    MaintenanceEvent,
    Logbook,
)

LOGBOOK_YAML = """
vehicle:
  name: Gol 1.6
fuel:
  - id: a1
    date: '2024-01-05'
    totalValue: 100
    pricePerLiter: 5
    kmEnd: 1000
    fuelType: GASOLINA
    notes: ''
  - id: b2
    date: 2024-02-10
    totalValue: 120
    pricePerLiter: 6
    kmEnd: 1400
    fuelType: ETANOL
maintenance:
  - id: m1
    date: '2024-03-01'
    serviceType: Troca de Óleo
    mileage: 1500
    cost: 350.0
    notes: Filtro de óleo
"""


@pytest.fixture
def logbook_file(tmp_path):
    path = tmp_path / "logbook.yaml"
    path.write_text(LOGBOOK_YAML, encoding="utf-8")
    return path


# =============================================================================
# load_logbook tests
# =============================================================================


class TestLoadLogbook:
    """Tests for load_logbook function."""

    def test_loads_records(self, logbook_file):
        logbook = load_logbook(logbook_file)

        assert isinstance(logbook, Logbook)
        assert logbook.name == "Gol 1.6"
        assert len(logbook.fuel_entries) == 2
        assert isinstance(logbook.fuel_entries[0], RawFuelEntry)
        assert logbook.fuel_entries[0].date == date(2024, 1, 5)
        assert logbook.fuel_entries[0].fuel_type == FuelType.GASOLINE
        assert logbook.fuel_entries[1].fuel_type == FuelType.ETHANOL
        assert len(logbook.maintenance) == 1
        assert isinstance(logbook.maintenance[0], MaintenanceEvent)
        assert logbook.maintenance[0].service_type == ServiceType.OIL_CHANGE
        assert logbook.maintenance[0].notes == "Filtro de óleo"

    def test_unquoted_dates(self, logbook_file):
        """Unquoted YAML dates load the same as quoted ones."""
        logbook = load_logbook(logbook_file)
        assert logbook.fuel_entries[1].date == date(2024, 2, 10)

    def test_derived_values(self, logbook_file):
        second = load_logbook(logbook_file).processed_entries[1]
        assert second.distance == 400
        assert second.liters == 20
        assert second.avg_kmpl == 20

    def test_malformed_numbers_fall_back_to_zero(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(
            """
fuel:
  - id: x
    date: '2024-01-05'
    totalValue: abc
    pricePerLiter: -3
    kmEnd: null
"""
        )
        entry = load_logbook(path).fuel_entries[0]
        assert entry.total_value == 0
        assert entry.price_per_liter == 0
        assert entry.km_end == 0
        assert entry.fuel_type == FuelType.GASOLINE

    def test_fuel_record_without_odometer(self, tmp_path):
        """Sparse fuel records are typed by the list they sit in."""
        path = tmp_path / "sparse.yaml"
        path.write_text(
            """
fuel:
  - id: a1
    date: '2024-01-05'
    totalValue: 100
    pricePerLiter: 5
    kmEnd: 1000
  - id: b2
    date: '2024-02-10'
    totalValue: 120
  - id: c3
    date: '2024-03-10'
maintenance:
  - id: m1
    date: '2024-03-01'
"""
        )
        logbook = load_logbook(path)

        assert all(isinstance(e, RawFuelEntry) for e in logbook.fuel_entries)
        assert logbook.get_fuel_entry("b2").km_end == 0
        assert logbook.get_fuel_entry("b2").price_per_liter == 0
        assert logbook.get_fuel_entry("c3").total_value == 0
        assert logbook.maintenance[0].service_type == ServiceType.OTHER

        processed = logbook.processed_entries
        assert [e.id for e in processed] == ["a1", "b2", "c3"]
        assert processed[1].liters == 0
        assert processed[1].avg_kmpl == 0

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        logbook = load_logbook(path)
        assert logbook.fuel_entries == []
        assert logbook.maintenance == []


# =============================================================================
# Fuel entry write tests
# =============================================================================


class TestSaveFuelEntry:
    """Tests for save_fuel_entry and delete_fuel_entry."""

    def test_appends_new_entry(self, logbook_file):
        entry = RawFuelEntry("c3", date(2024, 3, 10), 130.0, 6.5, 1800, FuelType.GASOLINE)
        save_fuel_entry(logbook_file, entry)

        logbook = load_logbook(logbook_file)
        assert len(logbook.fuel_entries) == 3
        assert logbook.get_fuel_entry("c3").km_end == 1800

    def test_updates_existing_entry(self, logbook_file):
        entry = RawFuelEntry("a1", date(2024, 1, 5), 110.0, 5.5, 1000, FuelType.GASOLINE, "fix")
        save_fuel_entry(logbook_file, entry)

        logbook = load_logbook(logbook_file)
        assert len(logbook.fuel_entries) == 2
        assert logbook.get_fuel_entry("a1").total_value == 110.0
        assert logbook.get_fuel_entry("a1").notes == "fix"

    def test_preserves_other_sections(self, logbook_file):
        entry = RawFuelEntry("c3", date(2024, 3, 10), 130.0, 6.5, 1800, FuelType.GASOLINE)
        save_fuel_entry(logbook_file, entry)

        data = yaml.safe_load(logbook_file.read_text(encoding="utf-8"))
        assert data["vehicle"]["name"] == "Gol 1.6"
        assert data["maintenance"][0]["serviceType"] == "Troca de Óleo"

    def test_delete(self, logbook_file):
        delete_fuel_entry(logbook_file, "a1")
        logbook = load_logbook(logbook_file)
        assert [e.id for e in logbook.fuel_entries] == ["b2"]

    def test_delete_unknown_raises(self, logbook_file):
        with pytest.raises(KeyError):
            delete_fuel_entry(logbook_file, "nope")


# =============================================================================
# Maintenance write tests
# =============================================================================


class TestSaveMaintenanceEvent:
    """Tests for save_maintenance_event and delete_maintenance_event."""

    def test_new_event_gets_id(self, logbook_file):
        event = MaintenanceEvent(None, date(2024, 4, 1), ServiceType.GENERAL, 2000, 800.0)
        event_id = save_maintenance_event(logbook_file, event)

        assert event_id
        logbook = load_logbook(logbook_file)
        assert logbook.get_maintenance_event(event_id).service_type == ServiceType.GENERAL

    def test_updates_existing_event(self, logbook_file):
        event = MaintenanceEvent("m1", date(2024, 3, 1), ServiceType.OIL_CHANGE, 1500, 400.0)
        assert save_maintenance_event(logbook_file, event) == "m1"

        logbook = load_logbook(logbook_file)
        assert len(logbook.maintenance) == 1
        assert logbook.maintenance[0].cost == 400.0

    def test_delete(self, logbook_file):
        delete_maintenance_event(logbook_file, "m1")
        assert load_logbook(logbook_file).maintenance == []

    def test_delete_unknown_raises(self, logbook_file):
        with pytest.raises(KeyError):
            delete_maintenance_event(logbook_file, "nope")


class TestCreateLogbook:
    """Tests for create_logbook."""

    def test_creates_empty_logbook(self, tmp_path):
        path = tmp_path / "new.yaml"
        create_logbook(path, name="Uno")

        logbook = load_logbook(path)
        assert logbook.name == "Uno"
        assert logbook.fuel_entries == []
        assert logbook.maintenance == []
