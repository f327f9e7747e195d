"""Logbook class - the main aggregate for fuel and maintenance records."""

from datetime import date
from typing import List, Optional

from .aggregator import MonthlyRow, aggregate_monthly
from .fuel_entry import ProcessedFuelEntry, RawFuelEntry
from .maintenance_event import MaintenanceEvent
from .maintenance_log import sort_maintenance
from .months import DEFAULT_LOCALE
from .processor import process_entries
from .years import available_years, default_year


class Logbook:
    """Raw fuel purchases and maintenance events for one vehicle."""

    def __init__(
        self,
        fuel_entries: Optional[List[RawFuelEntry]] = None,
        maintenance: Optional[List[MaintenanceEvent]] = None,
        name: Optional[str] = None,
    ):
        self.fuel_entries = fuel_entries or []
        self.maintenance = maintenance or []
        self.name = name

    @property
    def processed_entries(self) -> List[ProcessedFuelEntry]:
        """Derived entries, recomputed from the raw set on every access."""
        return process_entries(self.fuel_entries)

    @property
    def current_mileage(self) -> int:
        """Highest odometer reading across fuel and maintenance records."""
        readings = [e.km_end for e in self.fuel_entries]
        readings.extend(m.mileage for m in self.maintenance)
        return max(readings, default=0)

    @property
    def years(self) -> List[int]:
        """Years with fuel entries, most recent first."""
        return available_years(self.fuel_entries)

    def default_year(self, today: Optional[date] = None) -> int:
        return default_year(self.fuel_entries, today)

    def monthly(self, year: int, locale: str = DEFAULT_LOCALE) -> List[MonthlyRow]:
        """Twelve chart rows for the given year."""
        return aggregate_monthly(self.processed_entries, year, locale)

    def total_spent(self, year: Optional[int] = None) -> float:
        """Total paid for fuel, optionally limited to one year."""
        return sum(
            (e.total_value for e in self.fuel_entries if year is None or e.date.year == year),
            0.0,
        )

    @property
    def non_monotonic_entries(self) -> List[ProcessedFuelEntry]:
        """Fill-ups whose odometer reading went backwards."""
        return [e for e in self.processed_entries if e.distance < 0]

    def get_fuel_entry(self, entry_id: str) -> Optional[RawFuelEntry]:
        """Find a fuel entry by its id."""
        for entry in self.fuel_entries:
            if entry.id == entry_id:
                return entry
        return None

    def get_maintenance_event(self, event_id: str) -> Optional[MaintenanceEvent]:
        """Find a maintenance event by its id."""
        for event in self.maintenance:
            if event.id == event_id:
                return event
        return None

    def maintenance_sorted(self) -> List[MaintenanceEvent]:
        """Maintenance log, most recent first."""
        return sort_maintenance(self.maintenance)
