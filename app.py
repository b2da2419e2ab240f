# app.py
import atexit
import sys

from flask import Flask, jsonify, request

import config
from errors import AlreadyOccupied, HotelError, InvalidRoom, PersistenceFailure, RoomVacant
from models import MealKind
from registry import RoomRegistry
from storage import PersistenceStore, record_to_dict

app = Flask(__name__)

# In-memory state, loaded from the data file in main()
registry = RoomRegistry()
store = PersistenceStore(config.DATA_FILE)

ERROR_STATUS = {
    InvalidRoom: 404,
    RoomVacant: 404,
    AlreadyOccupied: 400,
    PersistenceFailure: 500,
}


# Helper functions
def room_json(rec):
    data = record_to_dict(rec)
    data["grand_total"] = rec.grand_total
    return data


def bill_json(bill):
    return {
        "room_number": bill.room_number,
        "name": bill.name,
        "room_cost": bill.room_cost,
        "food_bill": bill.food_bill,
        "grand_total": bill.grand_total,
    }


def json_body() -> dict:
    data = request.json
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    return data


def int_field(data: dict, key: str) -> int:
    value = data.get(key)
    if value is None:
        raise ValueError(f"{key} required")
    # floats and booleans are refused rather than truncated
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    raise ValueError(f"{key} must be an integer")


def text_field(data: dict, key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def save_registry():
    store.save_all(registry.list_all())


@app.errorhandler(HotelError)
def handle_hotel_error(err):
    status = ERROR_STATUS.get(type(err), 400)
    if status >= 500:
        app.logger.error("%s", err.message)
    return jsonify({"error": err.message}), status


@app.route("/health")
def health():
    return jsonify({"status": "ok"})


# --- JSON API ---

@app.route("/api/rooms", methods=["GET", "POST"])
def api_rooms():
    if request.method == "GET":
        return jsonify([room_json(r) for r in registry.list_all()])

    try:
        data = json_body()
        rno = int_field(data, "room_number")
        days = int_field(data, "days")
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    rec = registry.book(
        rno,
        name=text_field(data, "name"),
        address=text_field(data, "address"),
        phone=text_field(data, "phone"),
        days=days,
    )
    return jsonify(room_json(rec)), 201


@app.route("/api/rooms/<int:rno>", methods=["GET", "PATCH"])
def api_room(rno):
    if request.method == "GET":
        rec = registry.find(rno)
        if rec is None:
            return jsonify({"error": f"Room {rno} is vacant"}), 404
        return jsonify(room_json(rec))

    try:
        data = json_body()
        days = int_field(data, "days") if "days" in data else None
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    if not any(k in data for k in ("name", "address", "phone", "days")):
        return jsonify({"error": "nothing to modify"}), 400

    rec = None
    if "name" in data:
        rec = registry.set_name(rno, text_field(data, "name"))
    if "address" in data:
        rec = registry.set_address(rno, text_field(data, "address"))
    if "phone" in data:
        rec = registry.set_phone(rno, text_field(data, "phone"))
    if days is not None:
        rec = registry.set_days(rno, days)
    return jsonify(room_json(rec))


@app.route("/api/rooms/<int:rno>/status")
def api_room_status(rno):
    return jsonify({"room_number": rno, "status": registry.room_status(rno).value})


@app.route("/api/checkout", methods=["POST"])
def api_checkout():
    try:
        data = json_body()
        rno = int_field(data, "room_number")
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    if data.get("confirm") is True:
        bill = registry.confirm_checkout(rno)
        return jsonify({"checked_out": True, **bill_json(bill)})
    bill = registry.checkout(rno)
    return jsonify({"checked_out": False, **bill_json(bill)})


@app.route("/api/food", methods=["POST"])
def api_food():
    try:
        data = json_body()
        rno = int_field(data, "room_number")
        people = int_field(data, "people")
        meal = MealKind(text_field(data, "meal").lower())
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    added = registry.add_food_charge(rno, meal, people)
    return jsonify({
        "room_number": added.room_number,
        "meal": added.meal.value,
        "people": added.people,
        "charge": added.charge,
        "food_bill": added.food_bill,
    })


@app.route("/api/save", methods=["POST"])
def api_save():
    save_registry()
    return jsonify({"saved": len(registry), "path": store.path})


def save_on_exit():
    try:
        save_registry()
    except PersistenceFailure as e:
        app.logger.error("Rooms were not saved: %s", e.message)


def main():
    global registry
    config.configure_logging()
    try:
        registry = RoomRegistry.from_records(store.load_all())
    except HotelError as e:
        app.logger.error("Could not load rooms: %s", e.message)
        return 1
    atexit.register(save_on_exit)
    # one request at a time; the registry assumes exclusive access
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG, threaded=False, use_reloader=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
