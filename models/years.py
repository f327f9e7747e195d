"""Year selection for the monthly charts."""

from datetime import date
from typing import Iterable, List, Optional

from .fuel_entry import RawFuelEntry


def available_years(entries: Iterable[RawFuelEntry]) -> List[int]:
    """Distinct years with entries, most recent first."""
    return sorted({e.date.year for e in entries}, reverse=True)


def default_year(entries: Iterable[RawFuelEntry], today: Optional[date] = None) -> int:
    """Most recent year with data, or the current year when there is none."""
    years = available_years(entries)
    if years:
        return years[0]
    return (today or date.today()).year
