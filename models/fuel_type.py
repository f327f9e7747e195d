"""FuelType enum for the fuel grades a fill-up can record."""

from enum import Enum


class FuelType(Enum):
    """Fuel grades. Values are the labels stored in the logbook."""

    ETHANOL = "ETANOL"
    GASOLINE = "GASOLINA"

    @classmethod
    def from_value(cls, value: str) -> "FuelType":
        """Look up by stored label or member name (case-insensitive)."""
        for member in cls:
            if value.upper() in (member.value, member.name):
                return member
        raise ValueError(f"Unknown fuel type: {value!r}")
