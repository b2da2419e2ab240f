# storage.py
import json
import logging
import os
from dataclasses import asdict
from typing import Iterable, List

from errors import PersistenceFailure
from models import OccupancyRecord, RoomClass, daily_rate, in_range, room_class_for

logger = logging.getLogger(__name__)

FIELDS = ("room_number", "name", "address", "phone", "days", "room_class", "room_cost", "food_bill")
INT_FIELDS = ("room_number", "days", "room_cost", "food_bill")
TEXT_FIELDS = ("name", "address", "phone")


def record_to_dict(rec: OccupancyRecord) -> dict:
    data = asdict(rec)
    data["room_class"] = rec.room_class.value
    return data


def record_from_dict(data: dict) -> OccupancyRecord:
    if not isinstance(data, dict):
        raise ValueError("record is not an object")
    missing = [f for f in FIELDS if f not in data]
    if missing:
        raise ValueError(f"record is missing {', '.join(missing)}")
    for f in INT_FIELDS:
        # bool is an int subclass but never a valid value here
        if not isinstance(data[f], int) or isinstance(data[f], bool):
            raise ValueError(f"{f} must be an integer")
    for f in TEXT_FIELDS:
        if not isinstance(data[f], str):
            raise ValueError(f"{f} must be text")

    rno = data["room_number"]
    if not in_range(rno):
        raise ValueError(f"room number {rno} is out of range")
    room_class = RoomClass(data["room_class"])
    if room_class != room_class_for(rno):
        raise ValueError(f"room {rno} cannot be {room_class.value}")
    if data["room_cost"] != data["days"] * daily_rate(room_class):
        raise ValueError(f"room {rno} cost {data['room_cost']} does not match {data['days']} day(s)")

    return OccupancyRecord(
        room_number=rno,
        name=data["name"],
        address=data["address"],
        phone=data["phone"],
        days=data["days"],
        room_class=room_class,
        room_cost=data["room_cost"],
        food_bill=data["food_bill"],
    )


class PersistenceStore:
    """Whole-file JSON mirror of the occupied rooms (one object per room)."""

    def __init__(self, path: str):
        self.path = path

    def load_all(self) -> List[OccupancyRecord]:
        if not os.path.exists(self.path):
            logger.info("No existing record file at %s, starting with empty data", self.path)
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Could not read %s: %s", self.path, e)
            raise PersistenceFailure(f"Could not read {self.path}: {e}", self.path) from e

        if not isinstance(raw, list):
            raise PersistenceFailure(f"{self.path} does not hold a list of rooms", self.path)
        try:
            records = [record_from_dict(item) for item in raw]
        except ValueError as e:
            logger.error("Malformed record in %s: %s", self.path, e)
            raise PersistenceFailure(f"Malformed record in {self.path}: {e}", self.path) from e

        logger.info("Loaded %d room(s) from %s", len(records), self.path)
        return records

    def save_all(self, records: Iterable[OccupancyRecord]) -> None:
        payload = [record_to_dict(rec) for rec in records]
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
                f.write("\n")
        except OSError as e:
            logger.error("Could not save %s: %s", self.path, e)
            raise PersistenceFailure(f"Could not save {self.path}: {e}", self.path) from e
        logger.info("Saved %d room(s) to %s", len(payload), self.path)
