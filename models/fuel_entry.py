"""Fuel purchase records: the raw record as stored and its derived view."""

from dataclasses import dataclass
from datetime import date

from .fuel_type import FuelType


@dataclass(frozen=True)
class RawFuelEntry:
    """A fuel purchase as stored in the logbook."""

    id: str
    date: date
    total_value: float
    price_per_liter: float
    km_end: int
    fuel_type: FuelType
    notes: str = ""


@dataclass(frozen=True)
class ProcessedFuelEntry(RawFuelEntry):
    """
    A fuel purchase enriched with values derived from its predecessor.

    km_start/distance depend on the previous entry in chronological order,
    so instances only come out of process_entries().
    """

    liters: float = 0.0
    km_start: int = 0
    distance: int = 0
    avg_kmpl: float = 0.0

    @property
    def has_efficiency(self) -> bool:
        """True when the fill-up contributes to economy averages."""
        return self.avg_kmpl > 0
