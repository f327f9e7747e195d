"""Display formatting shared by the CLI and the web surface."""

from typing import Optional

CURRENCY_SYMBOL = "R$"


def format_currency(value: Optional[float]) -> str:
    """Currency with 2 decimal places."""
    return f"{CURRENCY_SYMBOL} {value:,.2f}" if value is not None else "-"


def format_kmpl(value: Optional[float]) -> str:
    """Fuel economy with 1 decimal place; '-' when there is no data."""
    if not value:
        return "-"
    return f"{value:.1f} km/L"


def format_price(value: Optional[float]) -> str:
    """Price per liter with 3 decimal places."""
    return f"{CURRENCY_SYMBOL} {value:.3f}" if value is not None else "-"


def format_km(km: Optional[float]) -> str:
    """Odometer/distance with thousands separator."""
    return f"{km:,.0f}" if km is not None else "-"


def truncate(text: Optional[str], max_len: int = 30) -> str:
    """Truncate text with ellipsis if too long."""
    if not text:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
