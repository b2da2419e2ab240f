# cli.py
"""
Front desk text menu.

Loads the occupied rooms at start, works on them in memory and writes them
back on Exit.

Menus:
  1) Book A Room  2) Customer Information  3) Rooms Allotted
  4) Edit Customer Details  5) Order Food from Restaurant  6) Exit
"""

import sys
from typing import List

import config
from errors import AlreadyOccupied, HotelError, InvalidRoom, PersistenceFailure, RoomVacant
from models import MEAL_RATES, ROOM_BANDS, MealKind, RoomStatus, daily_rate
from registry import RoomRegistry
from storage import PersistenceStore

MEALS = {"1": MealKind.BREAKFAST, "2": MealKind.LUNCH, "3": MealKind.DINNER}


class CLI:
    def __init__(self, registry: RoomRegistry, store: PersistenceStore):
        self.registry = registry
        self.store = store

    def input_int(self, prompt: str) -> int:
        while True:
            s = input(prompt + ": ").strip()
            try:
                return int(s)
            except ValueError:
                print("Please enter a valid number")

    def main_menu(self):
        while True:
            print("\n=== THE HOTEL ===")
            print("1) Book A Room\n2) Customer Information\n3) Rooms Allotted")
            print("4) Edit Customer Details\n5) Order Food from Restaurant\n6) Exit")
            choice = input("Enter Your Choice: ").strip()
            try:
                if choice == "1":
                    self.book_room()
                elif choice == "2":
                    self.display_room()
                elif choice == "3":
                    self.display_all_rooms()
                elif choice == "4":
                    self.edit_menu()
                elif choice == "5":
                    self.order_food()
                elif choice == "6":
                    if self.exit_and_save():
                        print("Exiting Hotel Management System. Goodbye!")
                        return
                else:
                    print("Wrong choice. Please try again.")
            except HotelError as e:
                print(f"Sorry, {e.message}.")

    # ----------------- Book -----------------
    def book_room(self):
        headers = ["Rooms", "Room Type", "Rate/day"]
        rows = [[f"{first}-{last}", rc.value, str(daily_rate(rc))] for first, last, rc in ROOM_BANDS]
        print(self._format_table(headers, rows))

        print("\nENTER CUSTOMER DETAILS")
        rno = self.input_int("Room Number (1-100)")
        # refuse before asking for the rest of the details
        status = self.registry.room_status(rno)
        if status == RoomStatus.OUT_OF_RANGE:
            raise InvalidRoom(rno)
        if status == RoomStatus.OCCUPIED:
            raise AlreadyOccupied(rno)
        name = input("Name: ").strip()
        address = input("Address: ").strip()
        phone = input("Phone Number: ").strip()
        days = self.input_int("Number of Days")
        rec = self.registry.book(rno, name, address, phone, days)
        print(f"Room {rec.room_number} ({rec.room_class.value}) has been booked for {rec.name}.")

    # ----------------- Lookup -----------------
    def display_room(self):
        rno = self.input_int("Enter Room Number to display")
        rec = self.registry.find(rno)
        if rec is None:
            print(f"Room {rno} is Vacant.")
            return
        print("\nCustomer Details")
        print("-" * 18)
        print(f"Room Number: {rec.room_number}")
        print(f"Name: {rec.name}")
        print(f"Address: {rec.address}")
        print(f"Phone Number: {rec.phone}")
        print(f"Staying for: {rec.days} days.")
        print(f"Room Type: {rec.room_class.value}")
        print(f"Total Room Cost: {rec.room_cost}")
        print(f"Total Food Bill: {rec.food_bill}")
        print(f"Grand Total: {rec.grand_total}")

    def display_all_rooms(self):
        print("\nLIST OF ALLOTTED ROOMS")
        records = self.registry.list_all()
        if not records:
            print("No rooms currently allotted.")
            return
        headers = ["Room No", "Guest Name", "Address", "Room Type", "Contact No.", "Days", "Total"]
        rows = [
            [str(r.room_number), r.name, r.address, r.room_class.value, r.phone, str(r.days), str(r.grand_total)]
            for r in records
        ]
        print(self._format_table(headers, rows))

    # ----------------- Edit -----------------
    def edit_menu(self):
        print("\nEDIT MENU: 1) Modify Customer Information  2) Customer Check Out")
        c = input("Enter your choice: ").strip()
        if c == "1":
            self.modify_customer_info()
        elif c == "2":
            self.check_out()
        else:
            print("Wrong Choice. Please try again.")

    def modify_customer_info(self):
        print("\nMODIFY MENU: 1) Name  2) Address  3) Phone Number  4) Number of Days of Stay")
        c = input("Enter Your Choice: ").strip()
        if c not in ("1", "2", "3", "4"):
            print("Wrong Choice. Please try again.")
            return
        rno = self.input_int("Enter Room Number to modify")
        self._require_occupied(rno)

        if c == "1":
            self.registry.set_name(rno, input("Enter New Name: ").strip())
            print("Customer Name has been modified.")
        elif c == "2":
            self.registry.set_address(rno, input("Enter New Address: ").strip())
            print("Customer Address has been modified.")
        elif c == "3":
            self.registry.set_phone(rno, input("Enter New Phone Number: ").strip())
            print("Customer Phone Number has been modified.")
        else:
            rec = self.registry.set_days(rno, self.input_int("Enter New Number of Days of Stay"))
            print(f"Customer information is modified. New room cost: {rec.room_cost}")

    def check_out(self):
        rno = self.input_int("Enter Room Number to check out")
        bill = self.registry.checkout(rno)
        rec = self.registry.find(rno)
        print(f"Name: {rec.name}")
        print(f"Address: {rec.address}")
        print(f"Phone Number: {rec.phone}")
        print(f"Your total bill is: {bill.grand_total}")
        confirm = input("Do you want to check out this customer (y/n): ").strip()
        if confirm not in ("y", "Y"):
            print("Checkout cancelled.")
            return
        self.registry.confirm_checkout(rno)
        print(f"Customer Checked Out. Room {rno} is now vacant.")

    # ----------------- Food -----------------
    def order_food(self):
        print("\nRESTAURANT MENU: 1) Order Breakfast  2) Order Lunch  3) Order Dinner")
        c = input("Enter your choice: ").strip()
        rno = self.input_int("Enter Room Number for the order")
        self._require_occupied(rno)
        people = self.input_int("Enter number of people")
        meal = MEALS.get(c)
        if meal is None:
            print("Invalid choice for meal.")
            return
        added = self.registry.add_food_charge(rno, meal, people)
        print(f"{added.charge} added to the bill for {added.meal.value} ({MEAL_RATES[meal]} per person).")

    # ----------------- Exit -----------------
    def exit_and_save(self) -> bool:
        while True:
            try:
                self.store.save_all(self.registry.list_all())
                print(f"Data saved successfully to {self.store.path}")
                return True
            except PersistenceFailure as e:
                print(f"Error: {e.message}")
                again = input("Retry saving? (y = retry, q = quit without saving, other = back to menu): ").strip().lower()
                if again == "q":
                    return True
                if again != "y":
                    return False

    def _require_occupied(self, rno: int):
        # report a vacant room before asking for anything else
        if rno not in self.registry:
            raise RoomVacant(rno)

    def _format_table(self, headers: List[str], rows: List[List[str]]) -> str:
        # every column is as wide as its longest cell
        widths = [len(h) for h in headers]
        for row in rows:
            widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

        def line(cells):
            return "| " + " | ".join(c.ljust(w) for c, w in zip(cells, widths)) + " |"

        border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
        return "\n".join([border, line(headers), border] + [line(r) for r in rows] + [border])


def main():
    config.configure_logging()
    store = PersistenceStore(config.DATA_FILE)
    try:
        registry = RoomRegistry.from_records(store.load_all())
    except HotelError as e:
        print(f"Error: {e.message}")
        return 1
    try:
        CLI(registry, store).main_menu()
    except (KeyboardInterrupt, EOFError):
        print("\nProgram terminated")
        try:
            store.save_all(registry.list_all())
        except PersistenceFailure as e:
            print(f"Error: {e.message}")
            return 1
        print(f"Data saved successfully to {store.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
