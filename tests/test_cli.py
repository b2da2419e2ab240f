import builtins

import pytest

import cli
from cli import CLI
from models import MealKind
from registry import RoomRegistry
from storage import PersistenceStore


def feed(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(it))


def run_menu(monkeypatch, registry, store, answers):
    feed(monkeypatch, answers)
    CLI(registry, store).main_menu()


def test_book_lookup_and_exit(monkeypatch, capsys, registry, store):
    run_menu(monkeypatch, registry, store, [
        "1", "25", "Ann", "1 Main St", "555", "3",
        "2", "25",
        "6",
    ])
    out = capsys.readouterr().out
    assert "Room 25 (Deluxe) has been booked for Ann." in out
    assert "Total Room Cost: 30000" in out
    assert "Grand Total: 30000" in out
    assert [r.room_number for r in store.load_all()] == [25]


def test_booking_refused_before_details(monkeypatch, capsys, registry, store):
    registry.book(90, "Cy", "", "", 1)
    run_menu(monkeypatch, registry, store, ["1", "90", "1", "101", "6"])
    out = capsys.readouterr().out
    assert "Room 90 is already booked" in out
    assert "Room 101 does not exist" in out
    assert registry.find(90).name == "Cy"


def test_bad_number_is_reprompted(monkeypatch, capsys, registry, store):
    run_menu(monkeypatch, registry, store, ["2", "abc", "7", "6"])
    out = capsys.readouterr().out
    assert "Please enter a valid number" in out
    assert "Room 7 is Vacant." in out


def test_list_all(monkeypatch, capsys, registry, store):
    run_menu(monkeypatch, registry, store, ["3", "6"])
    assert "No rooms currently allotted." in capsys.readouterr().out

    registry.book(65, "Bo", "2 High St", "555", 2)
    run_menu(monkeypatch, registry, store, ["3", "6"])
    out = capsys.readouterr().out
    assert "Executive" in out
    assert "25000" in out


def test_modify_days(monkeypatch, capsys, registry, store):
    registry.book(65, "Bo", "", "", 2)
    run_menu(monkeypatch, registry, store, ["4", "1", "4", "65", "5", "6"])
    assert registry.find(65).room_cost == 62500
    assert "New room cost: 62500" in capsys.readouterr().out


def test_modify_vacant_room(monkeypatch, capsys, registry, store):
    run_menu(monkeypatch, registry, store, ["4", "1", "1", "12", "6"])
    assert "Room 12 is vacant or does not exist" in capsys.readouterr().out


def test_checkout_cancel_then_confirm(monkeypatch, capsys, registry, store):
    registry.book(25, "Ann", "", "", 3)
    registry.add_food_charge(25, MealKind.LUNCH, 2)
    run_menu(monkeypatch, registry, store, [
        "4", "2", "25", "n",
        "4", "2", "25", "Y",
        "6",
    ])
    out = capsys.readouterr().out
    assert "Your total bill is: 32000" in out
    assert "Checkout cancelled." in out
    assert "Room 25 is now vacant." in out
    assert 25 not in registry


def test_order_food(monkeypatch, capsys, registry, store):
    registry.book(3, "Ed", "", "", 1)
    run_menu(monkeypatch, registry, store, ["5", "3", "3", "2", "6"])
    assert registry.find(3).food_bill == 2400
    assert "2400 added to the bill for dinner" in capsys.readouterr().out


def test_failed_save_can_go_back(monkeypatch, capsys, registry, tmp_path):
    bad = PersistenceStore(str(tmp_path / "nope" / "Record.json"))
    registry.book(3, "Ed", "", "", 1)
    run_menu(monkeypatch, registry, bad, ["6", "n", "6", "q"])
    out = capsys.readouterr().out
    assert out.count("Error: Could not save") == 2
    assert 3 in registry


def test_main_loads_and_saves(monkeypatch, capsys, tmp_path):
    path = str(tmp_path / "Record.json")
    seeded = RoomRegistry()
    seeded.book(42, "Gus", "", "", 2)
    PersistenceStore(path).save_all(seeded.list_all())

    monkeypatch.setattr(cli.config, "DATA_FILE", path)
    feed(monkeypatch, ["2", "42", "6"])
    assert cli.main() == 0
    assert "Name: Gus" in capsys.readouterr().out
    assert [r.room_number for r in PersistenceStore(path).load_all()] == [42]


def test_main_saves_when_input_ends(monkeypatch, capsys, tmp_path):
    path = str(tmp_path / "Record.json")
    monkeypatch.setattr(cli.config, "DATA_FILE", path)
    answers = iter(["1", "25", "Ann", "", "", "3"])

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)
    assert cli.main() == 0
    saved = PersistenceStore(path).load_all()
    assert [(r.room_number, r.name, r.room_cost) for r in saved] == [(25, "Ann", 30000)]
    assert "Program terminated" in capsys.readouterr().out


def test_main_reports_failed_save_when_input_ends(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr(cli.config, "DATA_FILE", str(tmp_path / "nope" / "Record.json"))

    def fake_input(prompt=""):
        raise KeyboardInterrupt

    monkeypatch.setattr(builtins, "input", fake_input)
    assert cli.main() == 1
    assert "Error: Could not save" in capsys.readouterr().out


def test_main_reports_unreadable_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "Record.json"
    path.write_text("garbage", encoding="utf-8")
    monkeypatch.setattr(cli.config, "DATA_FILE", str(path))
    assert cli.main() == 1
    assert "Error:" in capsys.readouterr().out
