# models.py
from dataclasses import dataclass
from enum import Enum

FIRST_ROOM = 1
LAST_ROOM = 100


class RoomClass(str, Enum):
    DELUXE = "Deluxe"
    EXECUTIVE = "Executive"
    PRESIDENTIAL = "Presidential"


class MealKind(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"


class RoomStatus(str, Enum):
    VACANT = "vacant"
    OCCUPIED = "occupied"
    OUT_OF_RANGE = "out_of_range"


# (first room, last room, class); bands cover 1-100 without gaps
ROOM_BANDS = [
    (1, 50, RoomClass.DELUXE),
    (51, 80, RoomClass.EXECUTIVE),
    (81, 100, RoomClass.PRESIDENTIAL),
]

DAILY_RATES = {
    RoomClass.DELUXE: 10000,
    RoomClass.EXECUTIVE: 12500,
    RoomClass.PRESIDENTIAL: 15000,
}

# per person
MEAL_RATES = {
    MealKind.BREAKFAST: 500,
    MealKind.LUNCH: 1000,
    MealKind.DINNER: 1200,
}


def in_range(room_number: int) -> bool:
    return FIRST_ROOM <= room_number <= LAST_ROOM


def room_class_for(room_number: int) -> RoomClass:
    for first, last, room_class in ROOM_BANDS:
        if first <= room_number <= last:
            return room_class
    raise ValueError(f"room number {room_number} is outside {FIRST_ROOM}-{LAST_ROOM}")


def daily_rate(room_class: RoomClass) -> int:
    return DAILY_RATES[room_class]


@dataclass(frozen=True)
class OccupancyRecord:
    room_number: int
    name: str = ""
    address: str = ""
    phone: str = ""
    days: int = 0
    room_class: RoomClass = RoomClass.DELUXE
    room_cost: int = 0
    food_bill: int = 0

    @property
    def grand_total(self) -> int:
        return self.room_cost + self.food_bill


@dataclass(frozen=True)
class FinalBill:
    room_number: int
    name: str
    room_cost: int
    food_bill: int
    grand_total: int


@dataclass(frozen=True)
class ChargeAdded:
    room_number: int
    meal: MealKind
    people: int
    charge: int
    food_bill: int
