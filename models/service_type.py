"""ServiceType enum for maintenance event categories."""

from enum import Enum


class ServiceType(Enum):
    """Maintenance categories. Values are the labels stored in the logbook."""

    OIL_CHANGE = "Troca de Óleo"
    TIRE_CHANGE = "Troca de Pneus"
    ENGINE_REVIEW = "Revisão do Motor"
    GENERAL = "Revisão Geral"
    OTHER = "Outro"

    @classmethod
    def from_value(cls, value: str) -> "ServiceType":
        """Look up by stored label or member name (case-insensitive name)."""
        for member in cls:
            if value == member.value or value.upper() == member.name:
                return member
        raise ValueError(f"Unknown service type: {value!r}")
