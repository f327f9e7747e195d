"""Maintenance log view model: ordering and form state for service records."""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from .maintenance_event import MaintenanceEvent
from .parsing import parse_date, parse_float, parse_int
from .service_type import ServiceType


def sort_maintenance(events: Iterable[MaintenanceEvent]) -> List[MaintenanceEvent]:
    """Most recent first; same-day events by mileage (highest first), then id."""
    by_id = sorted(events, key=lambda e: e.id or "")
    return sorted(by_id, key=lambda e: (e.date, e.mileage), reverse=True)


@dataclass
class MaintenanceForm:
    """
    Editable form state for a maintenance event.

    Numeric fields are kept as the strings the user typed; they are only
    parsed (with a 0 fallback) when the form is turned into an event.
    """

    date: str
    service_type: ServiceType = ServiceType.OIL_CHANGE
    mileage: str = ""
    cost: str = ""
    notes: str = ""
    event_id: Optional[str] = None

    @classmethod
    def blank(cls, current_mileage: int = 0, today: Optional[date] = None) -> "MaintenanceForm":
        """New-event form, pre-filled with today and the known mileage."""
        return cls(
            date=(today or date.today()).isoformat(),
            mileage=str(current_mileage) if current_mileage > 0 else "",
        )

    @classmethod
    def from_event(cls, event: MaintenanceEvent) -> "MaintenanceForm":
        """Form for editing an existing event."""
        return cls(
            date=event.date.isoformat(),
            service_type=event.service_type,
            mileage=str(event.mileage),
            cost=str(event.cost),
            notes=event.notes,
            event_id=event.id,
        )

    @property
    def is_edit(self) -> bool:
        return self.event_id is not None

    def to_event(self) -> MaintenanceEvent:
        """
        Build the event to hand to the store.

        Raises ValueError if the date is not a valid ISO date.
        """
        return MaintenanceEvent(
            id=self.event_id,
            date=parse_date(self.date),
            service_type=self.service_type,
            mileage=parse_int(self.mileage),
            cost=parse_float(self.cost),
            notes=self.notes,
        )
