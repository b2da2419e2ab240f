import pytest

from registry import RoomRegistry
from storage import PersistenceStore


@pytest.fixture
def registry():
    return RoomRegistry()


@pytest.fixture
def store(tmp_path):
    return PersistenceStore(str(tmp_path / "Record.json"))
