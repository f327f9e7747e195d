"""MaintenanceEvent class for service records."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from .service_type import ServiceType


@dataclass(frozen=True)
class MaintenanceEvent:
    """A record of maintenance performed. id is None until stored."""

    id: Optional[str]
    date: date
    service_type: ServiceType
    mileage: int
    cost: float
    notes: str = ""
