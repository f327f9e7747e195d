"""Flask web application serving logbook data to a chart/form client."""

import logging
import os
from pathlib import Path

from flask import Flask, abort, jsonify, request

# Add parent directory to path for model imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import (
    Logbook,
    MaintenanceForm,
    ServiceType,
    create_logbook,
    delete_fuel_entry,
    delete_maintenance_event,
    format_currency,
    format_kmpl,
    format_price,
    load_logbook,
    save_maintenance_event,
)
from models.loader import fuel_entry_to_dict, maintenance_event_to_dict
from web.config import config

app = Flask(__name__)
app.config.from_object(config[os.environ.get("FLASK_ENV", "default")])

logger = logging.getLogger(__name__)


def get_logbook_path() -> Path:
    return Path(app.config["LOGBOOK_PATH"])


def get_logbook() -> Logbook:
    """Load the configured logbook; a missing file reads as empty."""
    path = get_logbook_path()
    if not path.exists():
        return Logbook()
    return load_logbook(path)


def processed_entry_json(entry) -> dict:
    """Derived entry with raw fields, derived fields and display strings."""
    data = fuel_entry_to_dict(entry)
    data.update(
        {
            "liters": entry.liters,
            "kmStart": entry.km_start,
            "distance": entry.distance,
            "avgKmpl": entry.avg_kmpl,
            "display": {
                "totalValue": format_currency(entry.total_value),
                "pricePerLiter": format_price(entry.price_per_liter),
                "avgKmpl": format_kmpl(entry.avg_kmpl),
            },
        }
    )
    return data


@app.route("/api/entries")
def entries():
    """Derived fuel entries, chronological."""
    logbook = get_logbook()
    return jsonify([processed_entry_json(e) for e in logbook.processed_entries])


@app.route("/api/years")
def years():
    """Years with data (most recent first) and the default selection."""
    logbook = get_logbook()
    return jsonify({"years": logbook.years, "default": logbook.default_year()})


@app.route("/api/monthly")
def monthly():
    """Twelve chart rows for the selected year."""
    logbook = get_logbook()
    year = request.args.get("year", type=int) or logbook.default_year()
    locale = request.args.get("locale") or app.config["LOCALE"]
    rows = logbook.monthly(year, locale)
    return jsonify({"year": year, "rows": [row.to_dict() for row in rows]})


@app.route("/api/maintenance", methods=["GET"])
def maintenance_log():
    """Maintenance log, most recent first, plus the mileage for form pre-fill."""
    logbook = get_logbook()
    return jsonify(
        {
            "events": [maintenance_event_to_dict(e) for e in logbook.maintenance_sorted()],
            "currentMileage": logbook.current_mileage,
        }
    )


@app.route("/api/maintenance", methods=["POST"])
def save_maintenance():
    """Create or update a maintenance event from form or JSON fields."""
    fields = request.get_json(silent=True) or request.form
    path = get_logbook_path()
    logbook = get_logbook()

    form = MaintenanceForm.blank(logbook.current_mileage)
    form.event_id = fields.get("id") or None
    if fields.get("date"):
        form.date = fields.get("date")
    if fields.get("serviceType"):
        try:
            form.service_type = ServiceType.from_value(fields.get("serviceType"))
        except ValueError as e:
            return jsonify({"error": str(e)}), 400
    if fields.get("mileage") is not None:
        form.mileage = fields.get("mileage")
    form.cost = fields.get("cost", "")
    form.notes = fields.get("notes") or ""

    try:
        event = form.to_event()
    except ValueError:
        return jsonify({"error": f"Invalid date: {form.date!r}"}), 400

    if not path.exists():
        create_logbook(path)
    is_update = form.is_edit and logbook.get_maintenance_event(event.id) is not None
    event_id = save_maintenance_event(path, event)
    logger.info("Saved maintenance event %s", event_id)
    return jsonify({"id": event_id}), 200 if is_update else 201


@app.route("/api/maintenance/<event_id>", methods=["DELETE"])
def delete_maintenance(event_id: str):
    """Delete a maintenance event by id."""
    path = get_logbook_path()
    if not path.exists():
        abort(404)
    try:
        delete_maintenance_event(path, event_id)
    except KeyError:
        abort(404)
    return "", 204


@app.route("/api/fuel/<entry_id>", methods=["DELETE"])
def delete_fuel(entry_id: str):
    """Delete a fuel entry by id."""
    path = get_logbook_path()
    if not path.exists():
        abort(404)
    try:
        delete_fuel_entry(path, entry_id)
    except KeyError:
        abort(404)
    return "", 204


if __name__ == "__main__":
    logging.basicConfig(level=app.config["LOG_LEVEL"].upper())
    # Using 5001 to avoid conflict with macOS AirPlay Receiver on 5000
    app.run(debug=app.config.get("DEBUG", False), host="0.0.0.0", port=5001)
