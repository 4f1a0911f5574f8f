"""
Testing the state stores.
"""

import json

import pytest

from urdle.models.errors import ConfigurationError
from urdle.models.game import Attempt, GameState, LetterStatus
from urdle.services import storage_service
from urdle.services.storage_service import (
    JsonFileStateStore, MemoryStateStore, MongoStateStore, create_state_store, state_to_record
)

DAY = "2000-01-01"


class FakeCollection:
    """Just enough of a pymongo collection for the state store."""

    def __init__(self):
        self.documents = {}

    def find_one(self, query):
        document = self.documents.get(query["_id"])
        return dict(document) if document is not None else None

    def replace_one(self, query, document, upsert=False):
        assert upsert
        self.documents[query["_id"]] = {"_id": query["_id"], **document}


class BrokenCollection:
    def find_one(self, query):
        raise ConnectionError("server unavailable")

    def replace_one(self, query, document, upsert=False):
        raise ConnectionError("server unavailable")


@pytest.fixture
def played_state():
    attempt = Attempt("طاہر", (LetterStatus.ABSENT, LetterStatus.CORRECT, LetterStatus.ABSENT, LetterStatus.CORRECT))
    return GameState(day_key=DAY, max_attempts=5, attempts=(attempt,))


def test_record_layout(played_state):
    assert state_to_record(played_state) == {
        "version": 1,
        "date": DAY,
        "attempts": ["طاہر"],
        "gameOver": False,
        "won": False,
    }


def test_memory_store_round_trip(played_state):
    store = MemoryStateStore()
    assert store.load(DAY) is None
    assert store.save(played_state)
    assert store.load(DAY)["attempts"] == ["طاہر"]
    assert store.load("2000-01-02") is None


def test_file_store_round_trip(tmp_path, played_state):
    path = tmp_path / "nested" / "state.json"
    store = JsonFileStateStore(str(path))
    assert store.load(DAY) is None

    assert store.save(played_state)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["urdle_daily"]["date"] == DAY

    assert JsonFileStateStore(str(path)).load(DAY)["attempts"] == ["طاہر"]


def test_file_store_keeps_other_slots(tmp_path, played_state):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"other": {"keep": True}}), encoding="utf-8")
    JsonFileStateStore(str(path)).save(played_state)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["other"] == {"keep": True}
    assert "urdle_daily" in data


def test_corrupt_file_loads_as_nothing_and_is_overwritten(tmp_path, played_state):
    path = tmp_path / "state.json"
    path.write_text("{broken", encoding="utf-8")
    store = JsonFileStateStore(str(path))
    assert store.load(DAY) is None
    assert store.save(played_state)
    assert store.load(DAY)["date"] == DAY


def test_mongo_store_round_trip(played_state):
    collection = FakeCollection()
    store = MongoStateStore(collection)
    assert store.load(DAY) is None
    assert store.save(played_state)
    assert "urdle_daily" in collection.documents
    assert store.load(DAY) == state_to_record(played_state)


def test_mongo_store_failures_do_not_propagate(played_state):
    store = MongoStateStore(BrokenCollection())
    assert store.load(DAY) is None
    assert store.save(played_state) is False


class _Settings:
    STATE_FILE = None
    MONGO_URI = None
    MONGO_DB = "urdle"


def test_create_state_store_backends(tmp_path):
    class MemorySettings(_Settings):
        STORAGE_BACKEND = "memory"

    class FileSettings(_Settings):
        STORAGE_BACKEND = "file"
        STATE_FILE = str(tmp_path / "state.json")

    assert isinstance(create_state_store(MemorySettings), MemoryStateStore)
    file_store = create_state_store(FileSettings)
    assert isinstance(file_store, JsonFileStateStore)
    assert file_store.path == FileSettings.STATE_FILE


def test_create_state_store_misconfiguration():
    class MongoWithoutUri(_Settings):
        STORAGE_BACKEND = "mongo"

    class Unknown(_Settings):
        STORAGE_BACKEND = "redis"

    with pytest.raises(ConfigurationError):
        create_state_store(MongoWithoutUri)
    with pytest.raises(ConfigurationError):
        create_state_store(Unknown)


class _UnreachableClient:
    """Stands in for a MongoClient whose server cannot be reached."""

    def __init__(self, uri, **kwargs):
        self.uri = uri
        self.kwargs = kwargs
        self.closed = False
        self.admin = self

    def command(self, name):
        raise ConnectionError("server selection timed out")

    def __getitem__(self, db_name):
        return type("Database", (), {"daily_state": BrokenCollection()})()

    def close(self):
        self.closed = True


def test_unreachable_mongo_does_not_block_startup(monkeypatch, played_state):
    monkeypatch.setattr(storage_service, "MongoClient", _UnreachableClient)

    class MongoSettings(_Settings):
        STORAGE_BACKEND = "mongo"
        MONGO_URI = "mongodb://127.0.0.1:1/"
        MONGO_TIMEOUT_MS = 300

    store = create_state_store(MongoSettings)
    assert isinstance(store, MongoStateStore)
    assert store.client.kwargs["serverSelectionTimeoutMS"] == 300
    assert store.load(DAY) is None
    assert store.save(played_state) is False

    store.close_connection()
    assert store.client.closed
