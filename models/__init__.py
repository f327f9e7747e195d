"""
Fuel and maintenance logbook models.

This package provides data models and calculations for a vehicle logbook:
- FuelType / ServiceType: Enumerated record categories
- RawFuelEntry: Fuel purchase as stored
- ProcessedFuelEntry: Fuel purchase with distance, liters and economy
- MaintenanceEvent: Service records
- MonthlyRow: Per-month totals and averages for charts
- Logbook: Main aggregate combining all data
"""

from .fuel_type import FuelType
from .service_type import ServiceType
from .fuel_entry import RawFuelEntry, ProcessedFuelEntry
from .maintenance_event import MaintenanceEvent
from .calculations import calc_liters, calc_distance, calc_kmpl, safe_mean
from .parsing import parse_float, parse_int, parse_date
from .processor import process_entries
from .months import month_label
from .aggregator import MonthlyRow, aggregate_monthly
from .years import available_years, default_year
from .maintenance_log import MaintenanceForm, sort_maintenance
from .formatting import format_currency, format_kmpl, format_price, format_km, truncate
from .logbook import Logbook
from .loader import (
    load_logbook,
    create_logbook,
    save_fuel_entry,
    delete_fuel_entry,
    save_maintenance_event,
    delete_maintenance_event,
)

__all__ = [
    "FuelType",
    "ServiceType",
    "RawFuelEntry",
    "ProcessedFuelEntry",
    "MaintenanceEvent",
    "calc_liters",
    "calc_distance",
    "calc_kmpl",
    "safe_mean",
    "parse_float",
    "parse_int",
    "parse_date",
    "process_entries",
    "month_label",
    "MonthlyRow",
    "aggregate_monthly",
    "available_years",
    "default_year",
    "MaintenanceForm",
    "sort_maintenance",
    "format_currency",
    "format_kmpl",
    "format_price",
    "format_km",
    "truncate",
    "Logbook",
    "load_logbook",
    "create_logbook",
    "save_fuel_entry",
    "delete_fuel_entry",
    "save_maintenance_event",
    "delete_maintenance_event",
]
