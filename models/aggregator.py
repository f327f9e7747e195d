"""Monthly aggregation of derived fuel entries for charting."""

from dataclasses import dataclass
from typing import Dict, Iterable, List

from .calculations import safe_mean
from .fuel_entry import ProcessedFuelEntry
from .months import DEFAULT_LOCALE, month_label


@dataclass(frozen=True)
class MonthlyRow:
    """Totals and averages for one calendar month."""

    name: str
    total_spent: float = 0.0
    avg_price: float = 0.0
    avg_kmpl: float = 0.0

    def to_dict(self) -> Dict[str, object]:
        """Chart row shape: name, totalSpent, avgPrice, avgKmpl."""
        return {
            "name": self.name,
            "totalSpent": self.total_spent,
            "avgPrice": self.avg_price,
            "avgKmpl": self.avg_kmpl,
        }


def aggregate_monthly(
    entries: Iterable[ProcessedFuelEntry],
    year: int,
    locale: str = DEFAULT_LOCALE,
) -> List[MonthlyRow]:
    """
    Build exactly 12 rows (January..December) for the given year.

    - total_spent: sum of total_value
    - avg_price: mean price per liter over the month's entries
    - avg_kmpl: mean economy over entries that have economy data only
    Months without entries get zeros.
    """
    by_month: Dict[int, List[ProcessedFuelEntry]] = {m: [] for m in range(12)}
    for entry in entries:
        if entry.date.year == year:
            by_month[entry.date.month - 1].append(entry)

    rows = []
    for month in range(12):
        month_entries = by_month[month]
        rows.append(
            MonthlyRow(
                name=month_label(month, locale),
                total_spent=sum((e.total_value for e in month_entries), 0.0),
                avg_price=safe_mean(e.price_per_liter for e in month_entries),
                avg_kmpl=safe_mean(
                    e.avg_kmpl for e in month_entries if e.has_efficiency
                ),
            )
        )
    return rows
