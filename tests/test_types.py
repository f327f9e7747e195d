#!/usr/bin/env python3
"""Tests for FuelType and ServiceType enums."""

import pytest
from models import FuelType, ServiceType


class TestFuelType:
    """Tests for FuelType enum."""

    def test_stored_values(self):
        assert FuelType.ETHANOL.value == "ETANOL"
        assert FuelType.GASOLINE.value == "GASOLINA"

    def test_from_value_accepts_label_and_name(self):
        assert FuelType.from_value("GASOLINA") == FuelType.GASOLINE
        assert FuelType.from_value("etanol") == FuelType.ETHANOL
        assert FuelType.from_value("ethanol") == FuelType.ETHANOL

    def test_from_value_unknown(self):
        with pytest.raises(ValueError):
            FuelType.from_value("diesel")


class TestServiceType:
    """Tests for ServiceType enum."""

    def test_five_categories(self):
        assert len(ServiceType) == 5

    def test_from_value_accepts_label_and_name(self):
        assert ServiceType.from_value("Troca de Óleo") == ServiceType.OIL_CHANGE
        assert ServiceType.from_value("tire_change") == ServiceType.TIRE_CHANGE
        assert ServiceType.from_value("OTHER") == ServiceType.OTHER

    def test_from_value_unknown(self):
        with pytest.raises(ValueError):
            ServiceType.from_value("car wash")
