"""Entry processor: turns raw fuel purchases into derived per-fill-up metrics."""

import logging
from typing import Iterable, List, Tuple

from .calculations import calc_distance, calc_kmpl, calc_liters
from .fuel_entry import ProcessedFuelEntry, RawFuelEntry

logger = logging.getLogger(__name__)


def entry_sort_key(entry: RawFuelEntry) -> Tuple:
    """Chronological order: date, then odometer, then id."""
    return (entry.date, entry.km_end, entry.id)


def process_entries(raw_entries: Iterable[RawFuelEntry]) -> List[ProcessedFuelEntry]:
    """
    Derive liters, distance and fuel economy for every fuel entry.

    Logic:
    - Sort entries chronologically (see entry_sort_key)
    - The first entry starts from its own odometer reading (distance 0)
    - Each later entry starts from the previous entry's reading, even when
      that reading went backwards
    - Economy is 0 whenever distance or liters is not positive

    The result is rebuilt from scratch on every call.
    """
    ordered = sorted(raw_entries, key=entry_sort_key)
    if not ordered:
        return []

    processed = []
    previous_km = ordered[0].km_end
    for entry in ordered:
        liters = calc_liters(entry.total_value, entry.price_per_liter)
        distance = calc_distance(entry.km_end, previous_km)
        if distance < 0:
            logger.debug(
                "Odometer went backwards at entry %s: %s -> %s",
                entry.id,
                previous_km,
                entry.km_end,
            )
        processed.append(
            ProcessedFuelEntry(
                id=entry.id,
                date=entry.date,
                total_value=entry.total_value,
                price_per_liter=entry.price_per_liter,
                km_end=entry.km_end,
                fuel_type=entry.fuel_type,
                notes=entry.notes,
                liters=liters,
                km_start=previous_km,
                distance=distance,
                avg_kmpl=calc_kmpl(distance, liters),
            )
        )
        previous_km = entry.km_end

    return processed
