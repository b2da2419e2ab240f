# registry.py
import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from errors import AlreadyOccupied, InvalidRoom, RoomVacant
from models import (
    MEAL_RATES,
    ChargeAdded,
    FinalBill,
    MealKind,
    OccupancyRecord,
    RoomStatus,
    daily_rate,
    in_range,
    room_class_for,
)

logger = logging.getLogger(__name__)


class RoomRegistry:
    """Occupied rooms keyed by room number.

    Records are frozen snapshots; every mutation stores a new snapshot, so
    nothing handed out by the registry can change its state.
    """

    def __init__(self):
        self._rooms: Dict[int, OccupancyRecord] = {}

    @classmethod
    def from_records(cls, records: Iterable[OccupancyRecord]) -> "RoomRegistry":
        registry = cls()
        for rec in records:
            if not in_range(rec.room_number):
                raise InvalidRoom(rec.room_number)
            if rec.room_number in registry._rooms:
                raise AlreadyOccupied(rec.room_number)
            registry._rooms[rec.room_number] = rec
        return registry

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, room_number) -> bool:
        return room_number in self._rooms

    # Helper functions
    def _occupied(self, rno: int) -> OccupancyRecord:
        rec = self._rooms.get(rno)
        if rec is None:
            raise RoomVacant(rno)
        return rec

    def _bill(self, rec: OccupancyRecord) -> FinalBill:
        return FinalBill(
            room_number=rec.room_number,
            name=rec.name,
            room_cost=rec.room_cost,
            food_bill=rec.food_bill,
            grand_total=rec.grand_total,
        )

    # Queries
    def room_status(self, rno: int) -> RoomStatus:
        if not in_range(rno):
            return RoomStatus.OUT_OF_RANGE
        if rno in self._rooms:
            return RoomStatus.OCCUPIED
        return RoomStatus.VACANT

    def find(self, rno: int) -> Optional[OccupancyRecord]:
        if not in_range(rno):
            raise InvalidRoom(rno)
        return self._rooms.get(rno)

    def list_all(self) -> List[OccupancyRecord]:
        # no ordering guarantee
        return list(self._rooms.values())

    # Booking
    def book(self, rno: int, name: str, address: str, phone: str, days: int) -> OccupancyRecord:
        status = self.room_status(rno)
        if status == RoomStatus.OUT_OF_RANGE:
            raise InvalidRoom(rno)
        if status == RoomStatus.OCCUPIED:
            raise AlreadyOccupied(rno)

        room_class = room_class_for(rno)
        rec = OccupancyRecord(
            room_number=rno,
            name=name,
            address=address,
            phone=phone,
            days=days,
            room_class=room_class,
            room_cost=days * daily_rate(room_class),
            food_bill=0,
        )
        self._rooms[rno] = rec
        logger.info("Room %s booked for %s (%s, %s days)", rno, name, room_class.value, days)
        return rec

    # Edits
    def set_name(self, rno: int, name: str) -> OccupancyRecord:
        rec = replace(self._occupied(rno), name=name)
        self._rooms[rno] = rec
        return rec

    def set_address(self, rno: int, address: str) -> OccupancyRecord:
        rec = replace(self._occupied(rno), address=address)
        self._rooms[rno] = rec
        return rec

    def set_phone(self, rno: int, phone: str) -> OccupancyRecord:
        rec = replace(self._occupied(rno), phone=phone)
        self._rooms[rno] = rec
        return rec

    def set_days(self, rno: int, days: int) -> OccupancyRecord:
        current = self._occupied(rno)
        # class is fixed at booking time
        rec = replace(current, days=days, room_cost=days * daily_rate(current.room_class))
        self._rooms[rno] = rec
        return rec

    # Checkout
    def checkout(self, rno: int) -> FinalBill:
        """Preview the bill; the room stays occupied until confirm_checkout."""
        return self._bill(self._occupied(rno))

    def confirm_checkout(self, rno: int) -> FinalBill:
        bill = self._bill(self._occupied(rno))
        del self._rooms[rno]
        logger.info("Room %s checked out, grand total %s", rno, bill.grand_total)
        return bill

    # Restaurant
    def add_food_charge(self, rno: int, meal: MealKind, people: int) -> ChargeAdded:
        current = self._occupied(rno)
        meal = MealKind(meal)
        charge = MEAL_RATES[meal] * people
        rec = replace(current, food_bill=current.food_bill + charge)
        self._rooms[rno] = rec
        return ChargeAdded(
            room_number=rno,
            meal=meal,
            people=people,
            charge=charge,
            food_bill=rec.food_bill,
        )
