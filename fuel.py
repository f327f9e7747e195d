#!/usr/bin/env python3
"""
Unified CLI for the fuel and maintenance logbook.

Commands:
  entries            - Show fill-ups with distance, liters and economy
  monthly            - Show monthly totals and averages for a year
  years              - List years with fuel data
  add-fuel           - Add or update a fuel entry
  delete-fuel        - Remove a fuel entry
  maintenance        - Show the maintenance log
  log-maintenance    - Add or update a maintenance event
  delete-maintenance - Remove a maintenance event
"""

import argparse
import logging
import os
import sys
from datetime import date
from pathlib import Path
from tabulate import tabulate
from typing import List
from uuid import uuid4

from models import (
    FuelType,
    ServiceType,
    RawFuelEntry,
    ProcessedFuelEntry,
    MaintenanceEvent,
    MaintenanceForm,
    MonthlyRow,
    Logbook,
    load_logbook,
    save_fuel_entry,
    delete_fuel_entry,
    save_maintenance_event,
    delete_maintenance_event,
    parse_date,
    parse_float,
    parse_int,
    format_currency,
    format_kmpl,
    format_price,
    format_km,
    truncate,
)
from models.months import DEFAULT_LOCALE, MONTH_ABBREVIATIONS

# =============================================================================
# Table helpers
# =============================================================================


def make_entries_table(entries: List[ProcessedFuelEntry]) -> List[List[str]]:
    """Convert derived fuel entries to table rows."""
    rows = []
    for entry in entries:
        rows.append(
            [
                entry.date.isoformat(),
                format_km(entry.km_end),
                format_km(entry.distance),
                f"{entry.liters:.2f}",
                format_price(entry.price_per_liter),
                format_currency(entry.total_value),
                format_kmpl(entry.avg_kmpl),
                entry.fuel_type.value,
                truncate(entry.notes),
            ]
        )
    return rows


def make_monthly_table(rows: List[MonthlyRow]) -> List[List[str]]:
    """Convert monthly aggregate rows to table rows."""
    return [
        [
            row.name,
            format_currency(row.total_spent),
            format_price(row.avg_price) if row.avg_price else "-",
            format_kmpl(row.avg_kmpl),
        ]
        for row in rows
    ]


def make_maintenance_table(events: List[MaintenanceEvent]) -> List[List[str]]:
    """Convert maintenance events to table rows."""
    rows = []
    for event in events:
        rows.append(
            [
                event.date.isoformat(),
                event.service_type.value,
                format_km(event.mileage),
                format_currency(event.cost),
                truncate(event.notes),
                event.id or "-",
            ]
        )
    return rows


def print_header(logbook: Logbook) -> None:
    if logbook.name:
        print(f"Vehicle: {logbook.name}")
    print(f"Current mileage: {format_km(logbook.current_mileage)} km")


# =============================================================================
# Fuel commands
# =============================================================================


def cmd_entries(args, logbook: Logbook):
    """Show fill-ups with derived distance, liters and economy."""
    entries = logbook.processed_entries
    if args.year:
        entries = [e for e in entries if e.date.year == args.year]

    print_header(logbook)
    print(f"Fuel entries: {len(logbook.fuel_entries)}")
    if args.year:
        print(f"Showing: {len(entries)} ({args.year})")
    backwards = logbook.non_monotonic_entries
    if backwards:
        print(f"Warning: {len(backwards)} entries with odometer lower than the previous fill-up")
    print()

    if not entries:
        print("No fuel entries found.")
        return 0

    headers = ["Date", "Odometer", "Distance", "Liters", "Price/L", "Total", "km/L", "Fuel", "Notes"]
    print(tabulate(make_entries_table(entries), headers=headers, tablefmt="simple"))
    return 0


def cmd_monthly(args, logbook: Logbook):
    """Show monthly totals and averages for a year."""
    year = args.year or logbook.default_year()
    rows = logbook.monthly(year, args.locale)

    print_header(logbook)
    print(f"Year: {year}")
    print(f"Total spent: {format_currency(sum(r.total_spent for r in rows))}")
    print()

    headers = ["Month", "Spent", "Avg Price/L", "Avg km/L"]
    print(tabulate(make_monthly_table(rows), headers=headers, tablefmt="simple"))
    return 0


def cmd_years(args, logbook: Logbook):
    """List years with fuel data."""
    years = logbook.years
    if not years:
        print("No fuel entries found.")
        return 0
    for year in years:
        print(year)
    return 0


def cmd_add_fuel(args, logbook: Logbook):
    """Add or update a fuel entry."""
    try:
        entry_date = parse_date(args.date) if args.date else date.today()
        fuel_type = FuelType.from_value(args.fuel_type)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    entry = RawFuelEntry(
        id=args.id or uuid4().hex,
        date=entry_date,
        total_value=parse_float(args.total),
        price_per_liter=parse_float(args.price),
        km_end=parse_int(args.km),
        fuel_type=fuel_type,
        notes=args.notes or "",
    )

    action = "Updating" if logbook.get_fuel_entry(entry.id) else "Adding"
    print(f"{action} fuel entry in {args.logbook_file}:")
    print(f"  Date:     {entry.date.isoformat()}")
    print(f"  Odometer: {format_km(entry.km_end)}")
    print(f"  Total:    {format_currency(entry.total_value)}")
    print(f"  Price/L:  {format_price(entry.price_per_liter)}")
    print(f"  Fuel:     {entry.fuel_type.value}")
    if entry.notes:
        print(f"  Notes:    {entry.notes}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    save_fuel_entry(args.logbook_file, entry)
    print(f"Entry saved ({entry.id}).")
    return 0


def cmd_delete_fuel(args, logbook: Logbook):
    """Remove a fuel entry."""
    try:
        delete_fuel_entry(args.logbook_file, args.entry_id)
    except KeyError:
        print(f"Error: Unknown fuel entry '{args.entry_id}'")
        return 1
    print("Entry deleted.")
    return 0


# =============================================================================
# Maintenance commands
# =============================================================================


def cmd_maintenance(args, logbook: Logbook):
    """Show the maintenance log, most recent first."""
    events = logbook.maintenance_sorted()

    print_header(logbook)
    print(f"Maintenance events: {len(events)}")
    total_cost = sum(e.cost for e in events)
    if total_cost > 0:
        print(f"Total cost: {format_currency(total_cost)}")
    print()

    if not events:
        print("No maintenance events found.")
        return 0

    headers = ["Date", "Service", "Odometer", "Cost", "Notes", "Id"]
    print(tabulate(make_maintenance_table(events), headers=headers, tablefmt="simple"))
    return 0


def cmd_log_maintenance(args, logbook: Logbook):
    """Add or update a maintenance event."""
    try:
        service_type = ServiceType.from_value(args.service_type)
    except ValueError as e:
        print(f"Error: {e}")
        print("\nAvailable service types:")
        for member in ServiceType:
            print(f"  {member.name.lower()}  ({member.value})")
        return 1

    existing = logbook.get_maintenance_event(args.id) if args.id else None
    if existing:
        form = MaintenanceForm.from_event(existing)
    else:
        form = MaintenanceForm.blank(logbook.current_mileage)
        form.event_id = args.id
    form.service_type = service_type
    if args.date is not None:
        form.date = args.date
    if args.mileage is not None:
        form.mileage = args.mileage
    if args.cost is not None:
        form.cost = args.cost
    if args.notes is not None:
        form.notes = args.notes

    try:
        event = form.to_event()
    except ValueError:
        print(f"Error: Invalid date '{form.date}' (expected YYYY-MM-DD)")
        return 1

    print(f"{'Updating' if existing else 'Adding'} maintenance event in {args.logbook_file}:")
    print(f"  Service:  {event.service_type.value}")
    print(f"  Date:     {event.date.isoformat()}")
    print(f"  Odometer: {format_km(event.mileage)}")
    print(f"  Cost:     {format_currency(event.cost)}")
    if event.notes:
        print(f"  Notes:    {event.notes}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    event_id = save_maintenance_event(args.logbook_file, event)
    print(f"Event saved ({event_id}).")
    return 0


def cmd_delete_maintenance(args, logbook: Logbook):
    """Remove a maintenance event."""
    try:
        delete_maintenance_event(args.logbook_file, args.event_id)
    except KeyError:
        print(f"Error: Unknown maintenance event '{args.event_id}'")
        return 1
    print("Event deleted.")
    return 0


# =============================================================================
# Main
# =============================================================================

COMMANDS = {
    "entries": cmd_entries,
    "monthly": cmd_monthly,
    "years": cmd_years,
    "add-fuel": cmd_add_fuel,
    "delete-fuel": cmd_delete_fuel,
    "maintenance": cmd_maintenance,
    "log-maintenance": cmd_log_maintenance,
    "delete-maintenance": cmd_delete_maintenance,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fuel and maintenance logbook",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s logbooks/gol.yaml entries
  %(prog)s logbooks/gol.yaml entries --year 2024
  %(prog)s logbooks/gol.yaml monthly --year 2024 --locale en-US
  %(prog)s logbooks/gol.yaml add-fuel --date 2024-02-10 --total 120 \\
      --price 6 --km 1400 --fuel-type gasolina
  %(prog)s logbooks/gol.yaml log-maintenance oil_change --cost 350
  %(prog)s logbooks/gol.yaml delete-maintenance 3f2a9c
""",
    )
    parser.add_argument(
        "logbook_file",
        type=Path,
        help="Path to logbook YAML file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Entries subcommand
    entries_parser = subparsers.add_parser(
        "entries", help="Show fill-ups with distance, liters and economy"
    )
    entries_parser.add_argument("--year", type=int, help="Only show entries from this year")

    # Monthly subcommand
    monthly_parser = subparsers.add_parser(
        "monthly", help="Show monthly totals and averages for a year"
    )
    monthly_parser.add_argument(
        "--year",
        type=int,
        help="Year to report (default: most recent year with data)",
    )
    monthly_parser.add_argument(
        "--locale",
        choices=sorted(MONTH_ABBREVIATIONS),
        default=os.environ.get("FUEL_LOG_LOCALE", DEFAULT_LOCALE),
        help=f"Month label locale (default: {DEFAULT_LOCALE})",
    )

    # Years subcommand
    subparsers.add_parser("years", help="List years with fuel data")

    # Add fuel subcommand
    add_fuel_parser = subparsers.add_parser("add-fuel", help="Add or update a fuel entry")
    add_fuel_parser.add_argument(
        "--date",
        type=str,
        help="Purchase date in YYYY-MM-DD format (default: today)",
    )
    add_fuel_parser.add_argument("--total", type=str, required=True, help="Total amount paid")
    add_fuel_parser.add_argument("--price", type=str, required=True, help="Price per liter")
    add_fuel_parser.add_argument(
        "--km", type=str, required=True, help="Odometer reading at the pump"
    )
    add_fuel_parser.add_argument(
        "--fuel-type",
        type=str,
        default=FuelType.GASOLINE.value,
        help="Fuel type: gasolina or etanol (default: gasolina)",
    )
    add_fuel_parser.add_argument("--notes", type=str, help="Notes about the fill-up")
    add_fuel_parser.add_argument("--id", type=str, help="Entry id to update (default: new entry)")
    add_fuel_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be saved without saving",
    )

    # Delete fuel subcommand
    delete_fuel_parser = subparsers.add_parser("delete-fuel", help="Remove a fuel entry")
    delete_fuel_parser.add_argument("entry_id", type=str, help="Fuel entry id")

    # Maintenance subcommand
    subparsers.add_parser("maintenance", help="Show the maintenance log")

    # Log maintenance subcommand
    log_parser = subparsers.add_parser(
        "log-maintenance", help="Add or update a maintenance event"
    )
    log_parser.add_argument(
        "service_type",
        type=str,
        help="Service type (e.g., 'oil_change', 'tire_change', 'Revisão Geral')",
    )
    log_parser.add_argument(
        "--date",
        type=str,
        help="Service date in YYYY-MM-DD format (default: today)",
    )
    log_parser.add_argument(
        "--mileage",
        type=str,
        help="Odometer at time of service (default: current mileage)",
    )
    log_parser.add_argument("--cost", type=str, help="Cost of service")
    log_parser.add_argument("--notes", type=str, help="Notes about the service")
    log_parser.add_argument("--id", type=str, help="Event id to update (default: new event)")
    log_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be saved without saving",
    )

    # Delete maintenance subcommand
    delete_maint_parser = subparsers.add_parser(
        "delete-maintenance", help="Remove a maintenance event"
    )
    delete_maint_parser.add_argument("event_id", type=str, help="Maintenance event id")

    return parser


def main(argv=None):
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    # Validate logbook file exists
    if not args.logbook_file.exists():
        print(f"Error: File not found: {args.logbook_file}")
        return 1

    logbook = load_logbook(args.logbook_file)
    return COMMANDS[args.command](args, logbook)


if __name__ == "__main__":
    sys.exit(main() or 0)
