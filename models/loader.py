"""YAML loading and saving utilities for logbook data."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union
from uuid import uuid4

import yaml

from .fuel_entry import RawFuelEntry
from .fuel_type import FuelType
from .logbook import Logbook
from .maintenance_event import MaintenanceEvent
from .parsing import parse_date, parse_float, parse_int
from .service_type import ServiceType

logger = logging.getLogger(__name__)


_FUEL_KEYS = ("totalValue", "pricePerLiter", "kmEnd")


def _fuel_entry_from_dict(dct: Dict[str, Any]) -> RawFuelEntry:
    return RawFuelEntry(
        id=str(dct.get("id", "")),
        date=parse_date(dct.get("date")),
        total_value=parse_float(dct.get("totalValue")),
        price_per_liter=parse_float(dct.get("pricePerLiter")),
        km_end=parse_int(dct.get("kmEnd")),
        fuel_type=FuelType.from_value(dct.get("fuelType") or FuelType.GASOLINE.value),
        notes=dct.get("notes") or "",
    )


def _maintenance_event_from_dict(dct: Dict[str, Any]) -> MaintenanceEvent:
    return MaintenanceEvent(
        id=str(dct.get("id", "")),
        date=parse_date(dct.get("date")),
        service_type=ServiceType.from_value(dct.get("serviceType") or ServiceType.OTHER.value),
        mileage=parse_int(dct.get("mileage")),
        cost=parse_float(dct.get("cost")),
        notes=dct.get("notes") or "",
    )


def _parse_object(dct: Dict[str, Any]) -> Union[RawFuelEntry, MaintenanceEvent, Logbook, dict]:
    """Parse dictionary into appropriate object type."""
    # Fuel purchase
    if any(key in dct for key in _FUEL_KEYS):
        return _fuel_entry_from_dict(dct)
    # Maintenance event
    elif "serviceType" in dct:
        return _maintenance_event_from_dict(dct)
    # Top-level logbook object; records too sparse to recognise on their own
    # are typed by the list they sit in
    elif "fuel" in dct or "maintenance" in dct:
        vehicle = dct.get("vehicle") or {}
        return Logbook(
            [
                e if isinstance(e, RawFuelEntry) else _fuel_entry_from_dict(e)
                for e in dct.get("fuel") or []
            ],
            [
                e if isinstance(e, MaintenanceEvent) else _maintenance_event_from_dict(e)
                for e in dct.get("maintenance") or []
            ],
            vehicle.get("name"),
        )
    else:
        # Return dict as-is for unknown structures (like 'vehicle')
        return dct


def load_logbook(filename: Union[str, Path]) -> Logbook:
    """Load a logbook from a YAML file."""
    with open(filename, "rb") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader) or {}
    # Unquoted YAML dates load as date objects; default=str turns them back to ISO
    json_data = json.dumps(data, indent=4, default=str)
    logbook = json.loads(json_data, object_hook=_parse_object)
    if not isinstance(logbook, Logbook):
        logbook = Logbook()
    logger.debug(
        "Loaded %s: %d fuel entries, %d maintenance events",
        filename,
        len(logbook.fuel_entries),
        len(logbook.maintenance),
    )
    return logbook


def _read(filename: Union[str, Path]) -> Dict[str, Any]:
    """Load the raw YAML data (not parsed into objects)."""
    with open(filename, "r", encoding="utf-8") as fp:
        return yaml.load(fp, Loader=yaml.SafeLoader) or {}


def _write(filename: Union[str, Path], data: Dict[str, Any]) -> None:
    with open(filename, "w", encoding="utf-8") as fp:
        yaml.dump(
            data,
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )


def fuel_entry_to_dict(entry: RawFuelEntry) -> Dict[str, Any]:
    """Serialize a fuel entry to the logbook dict format (camelCase keys)."""
    return {
        "id": entry.id,
        "date": entry.date.isoformat(),
        "totalValue": entry.total_value,
        "pricePerLiter": entry.price_per_liter,
        "kmEnd": entry.km_end,
        "fuelType": entry.fuel_type.value,
        "notes": entry.notes,
    }


def maintenance_event_to_dict(event: MaintenanceEvent) -> Dict[str, Any]:
    """Serialize a maintenance event to the logbook dict format (camelCase keys)."""
    return {
        "id": event.id,
        "date": event.date.isoformat(),
        "serviceType": event.service_type.value,
        "mileage": event.mileage,
        "cost": event.cost,
        "notes": event.notes,
    }


def _upsert(records: list, record: Dict[str, Any]) -> bool:
    """Replace the record with the same id, or append. True if replaced."""
    for index, existing in enumerate(records):
        if str(existing.get("id")) == record["id"]:
            records[index] = record
            return True
    records.append(record)
    return False


def _remove(records: list, record_id: str, kind: str) -> None:
    for index, existing in enumerate(records):
        if str(existing.get("id")) == record_id:
            del records[index]
            return
    raise KeyError(f"No {kind} with id {record_id!r}")


def save_fuel_entry(filename: Union[str, Path], entry: RawFuelEntry) -> None:
    """
    Insert or update a fuel entry in a logbook YAML file.

    An existing entry with the same id is replaced in place.
    """
    data = _read(filename)
    if data.get("fuel") is None:
        data["fuel"] = []

    replaced = _upsert(data["fuel"], fuel_entry_to_dict(entry))
    _write(filename, data)
    logger.info("%s fuel entry %s in %s", "Updated" if replaced else "Added", entry.id, filename)


def delete_fuel_entry(filename: Union[str, Path], entry_id: str) -> None:
    """Remove a fuel entry by id. Raises KeyError if it does not exist."""
    data = _read(filename)
    _remove(data.get("fuel") or [], entry_id, "fuel entry")
    _write(filename, data)
    logger.info("Deleted fuel entry %s from %s", entry_id, filename)


def save_maintenance_event(filename: Union[str, Path], event: MaintenanceEvent) -> str:
    """
    Insert or update a maintenance event in a logbook YAML file.

    Events without an id get a fresh one. Returns the stored id.
    """
    event_id = event.id or uuid4().hex
    record = maintenance_event_to_dict(event)
    record["id"] = event_id

    data = _read(filename)
    if data.get("maintenance") is None:
        data["maintenance"] = []

    replaced = _upsert(data["maintenance"], record)
    _write(filename, data)
    logger.info(
        "%s maintenance event %s in %s", "Updated" if replaced else "Added", event_id, filename
    )
    return event_id


def delete_maintenance_event(filename: Union[str, Path], event_id: str) -> None:
    """Remove a maintenance event by id. Raises KeyError if it does not exist."""
    data = _read(filename)
    _remove(data.get("maintenance") or [], event_id, "maintenance event")
    _write(filename, data)
    logger.info("Deleted maintenance event %s from %s", event_id, filename)


def create_logbook(filename: Union[str, Path], name: Optional[str] = None) -> None:
    """Create a new, empty logbook YAML file."""
    data: Dict[str, Any] = {"fuel": [], "maintenance": []}
    if name is not None:
        data = {"vehicle": {"name": name}, **data}
    _write(filename, data)
    logger.info("Created logbook %s", filename)
