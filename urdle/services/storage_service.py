"""
State Storage Service

Persists the record of today's puzzle in a single well-known slot.
Only one puzzle is kept at a time; a record for another day is treated
as absent. Storage problems never block play: unreadable records load
as "no record" and failed writes are logged.
"""

import json
import os
from typing import Any, Dict, Optional

from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..config.game_settings import STATE_SCHEMA_VERSION, STORAGE_KEY
from ..models.errors import ConfigurationError
from ..models.game import GameState
from ..utils.game_logger import game_logger


def state_to_record(state: GameState) -> Dict[str, Any]:
    """Build the persisted record for a game state."""
    return {
        "version": STATE_SCHEMA_VERSION,
        "date": state.day_key,
        "attempts": list(state.guesses),
        "gameOver": state.game_over,
        "won": state.won,
    }


def validate_record(data: Any) -> Optional[Dict[str, Any]]:
    """
    Check the shape of a loaded record.

    Records written before versioning (no "version" field) are accepted.

    Returns:
        The normalized record, or None if it cannot be used
    """
    if not isinstance(data, dict):
        return None

    version = data.get("version", STATE_SCHEMA_VERSION)
    if not isinstance(version, int) or isinstance(version, bool) or version > STATE_SCHEMA_VERSION:
        return None

    day_key = data.get("date")
    if not isinstance(day_key, str):
        return None

    attempts = data.get("attempts", [])
    if not isinstance(attempts, list) or not all(isinstance(a, str) for a in attempts):
        return None

    game_over = data.get("gameOver", False)
    won = data.get("won", False)
    if not isinstance(game_over, bool) or not isinstance(won, bool):
        return None

    return {
        "version": version,
        "date": day_key,
        "attempts": list(attempts),
        "gameOver": game_over,
        "won": won,
    }


class StateStore:
    """
    Base class for the persisted-state slot.

    Subclasses implement _read and _write; load and save add validation,
    stale-day filtering and fail-open error handling.
    """

    def __init__(self, key: str = STORAGE_KEY):
        self.key = key

    def _read(self) -> Any:
        raise NotImplementedError

    def _write(self, record: Dict[str, Any]) -> None:
        raise NotImplementedError

    def close_connection(self):
        """Release backend resources; nothing to do for local stores."""

    def load(self, day_key: str) -> Optional[Dict[str, Any]]:
        """
        Load the stored record for day_key.

        Args:
            day_key: Today's DayKey

        Returns:
            The validated record, or None when nothing usable is stored for that day
        """
        try:
            raw = self._read()
        except Exception as e:
            game_logger.log_error(e, 'load_state', day_key)
            return None

        if raw is None:
            return None

        record = validate_record(raw)
        if record is None:
            game_logger.log_warning('load_state', 'Discarding malformed stored state', day_key=day_key)
            return None

        if record["date"] != day_key:
            game_logger.log_game_event(day_key, 'stale_state_discarded', stored_date=record["date"])
            return None

        return record

    def save(self, state: GameState) -> bool:
        """
        Persist a game state.

        Returns:
            bool: True if the record was written
        """
        try:
            self._write(state_to_record(state))
            return True
        except Exception as e:
            game_logger.log_error(e, 'save_state', state.day_key)
            return False


class MemoryStateStore(StateStore):
    """Keeps the record in process memory (tests, embedding in a host that persists itself)."""

    def __init__(self, key: str = STORAGE_KEY, initial: Optional[Any] = None):
        super().__init__(key)
        self._slots: Dict[str, Any] = {}
        if initial is not None:
            self._slots[key] = initial

    def _read(self) -> Any:
        return self._slots.get(self.key)

    def _write(self, record: Dict[str, Any]) -> None:
        self._slots[self.key] = record


class JsonFileStateStore(StateStore):
    """Stores the record as JSON in a file; the file holds a mapping of slot name to record."""

    def __init__(self, path: str, key: str = STORAGE_KEY):
        super().__init__(key)
        self.path = path

    def _read_all(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"State file {self.path} does not contain a JSON object")
        return data

    def _read(self) -> Any:
        return self._read_all().get(self.key)

    def _write(self, record: Dict[str, Any]) -> None:
        try:
            data = self._read_all()
        except ValueError:
            # Unreadable file: start over rather than refuse to save
            data = {}
        data[self.key] = record

        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        tmp_path = self.path + '.tmp'
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)


class MongoStateStore(StateStore):
    """Stores the record as one MongoDB document identified by the slot name."""

    def __init__(self, collection, key: str = STORAGE_KEY):
        super().__init__(key)
        self.collection = collection
        self.client: Optional[MongoClient] = None

    @classmethod
    def from_uri(cls,
                 mongo_uri: str,
                 db_name: str = 'urdle',
                 key: str = STORAGE_KEY,
                 timeout_ms: int = 2000) -> "MongoStateStore":
        """
        Connect to MongoDB and use the daily_state collection of db_name.

        An unreachable server is logged but does not stop the game: reads
        then load as "no record" and writes are logged until it comes back.

        Args:
            mongo_uri: MongoDB connection string
            db_name: Database name
            timeout_ms: Server selection timeout for every operation
        """
        client = MongoClient(mongo_uri, server_api=ServerApi('1'), serverSelectionTimeoutMS=timeout_ms)
        try:
            client.admin.command('ping')
        except Exception as e:
            game_logger.log_error(e, 'connect_state_store')

        store = cls(client[db_name].daily_state, key)
        store.client = client
        return store

    def _read(self) -> Any:
        document = self.collection.find_one({"_id": self.key})
        if document is None:
            return None
        document = dict(document)
        document.pop("_id", None)
        return document

    def _write(self, record: Dict[str, Any]) -> None:
        # Use upsert so the slot is created on first save
        self.collection.replace_one({"_id": self.key}, dict(record), upsert=True)

    def close_connection(self):
        """Close the MongoDB connection."""
        if self.client:
            self.client.close()


def create_state_store(config_class) -> StateStore:
    """
    Build the state store selected by configuration.

    Args:
        config_class: Configuration class with STORAGE_BACKEND and backend settings

    Returns:
        StateStore for the configured backend
    """
    backend = (getattr(config_class, 'STORAGE_BACKEND', 'file') or 'file').lower()

    if backend == 'memory':
        return MemoryStateStore()
    if backend == 'file':
        return JsonFileStateStore(config_class.STATE_FILE)
    if backend == 'mongo':
        if not config_class.MONGO_URI:
            raise ConfigurationError("MONGO_URI must be set for the mongo storage backend")
        return MongoStateStore.from_uri(
            config_class.MONGO_URI, config_class.MONGO_DB,
            timeout_ms=getattr(config_class, 'MONGO_TIMEOUT_MS', 2000)
        )

    raise ConfigurationError(f"Unknown storage backend: {backend}")
