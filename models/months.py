"""Short month labels for chart axes."""

from typing import Dict, List

DEFAULT_LOCALE = "pt-BR"

MONTH_ABBREVIATIONS: Dict[str, List[str]] = {
    "pt-BR": [
        "jan.", "fev.", "mar.", "abr.", "mai.", "jun.",
        "jul.", "ago.", "set.", "out.", "nov.", "dez.",
    ],
    "en-US": [
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ],
}


def month_label(month: int, locale: str = DEFAULT_LOCALE) -> str:
    """Capitalized short name for a 0-based month index."""
    if not 0 <= month <= 11:
        raise ValueError(f"Month index {month} out of range (0..11)")
    names = MONTH_ABBREVIATIONS.get(locale, MONTH_ABBREVIATIONS[DEFAULT_LOCALE])
    name = names[month]
    return name[:1].upper() + name[1:]
