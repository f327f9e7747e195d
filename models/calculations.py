"""Helper functions for per-fill-up and aggregate calculations.

Every division here checks its divisor and yields 0 instead of raising:
sparse data (a zero price, an empty month) is normal input.
"""

from typing import Iterable


def calc_liters(total_value: float, price_per_liter: float) -> float:
    """Liters purchased: total paid / price per liter, 0 without a price."""
    if price_per_liter <= 0:
        return 0.0
    return total_value / price_per_liter


def calc_distance(km_end: int, km_start: int) -> int:
    """Distance since the previous fill-up. Not clamped; may be negative."""
    return km_end - km_start


def calc_kmpl(distance: float, liters: float) -> float:
    """
    Fuel economy in km per liter.

    - 0 when no fuel volume is known (liters <= 0)
    - 0 when the odometer did not advance (distance <= 0)
    """
    if liters <= 0 or distance <= 0:
        return 0.0
    return distance / liters


def safe_mean(values: Iterable[float]) -> float:
    """Arithmetic mean, 0 for an empty sequence."""
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)
