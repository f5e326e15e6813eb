"""
Key-value persistence for the record collections.

Collections are stored whole under a fixed key, the same way the browser
app kept them in localStorage. Stores are passed explicitly to the services
that use them; there is no module-level store.
"""
import copy
import secrets
import string
from typing import Any, Dict, Protocol

from sqlalchemy import select

from .config import settings
from .db import Base, make_engine, make_sessionmaker, session_scope
from .models import StoreEntry

TRIPS_KEY = "fishing_companion_trips"
LOCATIONS_KEY = "fishing_companion_locations"
GEAR_INVENTORY_KEY = "fishing_companion_gear"
GEAR_SETS_KEY = "fishing_companion_gear_sets"
FISH_SPECIES_KEY = "fishing_companion_species"
CATCH_JOURNAL_KEY = "fishing_companion_journal"

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_LENGTH = 22


def generate_id() -> str:
    """Random base-36 identifier, unique in practice within a collection."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


class KeyValueStore(Protocol):
    def load(self, key: str, default: Any) -> Any: ...

    def save(self, key: str, value: Any) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    """Process-local store. Values are copied in and out like a serialized slot."""

    def __init__(self, initial: Dict[str, Any] | None = None):
        self._data: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def load(self, key: str, default: Any) -> Any:
        if key not in self._data:
            return default
        return copy.deepcopy(self._data[key])

    def save(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class SqlStore:
    """
    Store backed by a local SQLite file (or any SQLAlchemy URL).

    Errors from the database propagate; callers decide how to mask them.
    """

    def __init__(self, url: str, echo: bool = False):
        self.engine = make_engine(url, echo=echo)
        self._session_factory = make_sessionmaker(self.engine)

    def create_all(self) -> None:
        Base.metadata.create_all(self.engine)

    def load(self, key: str, default: Any) -> Any:
        with session_scope(self._session_factory) as session:
            row = session.execute(
                select(StoreEntry).where(StoreEntry.key == key)
            ).scalars().first()
            if row is None:
                return default
            return row.value

    def save(self, key: str, value: Any) -> None:
        with session_scope(self._session_factory) as session:
            row = session.get(StoreEntry, key)
            if row is None:
                session.add(StoreEntry(key=key, value=value))
            else:
                row.value = value

    def remove(self, key: str) -> None:
        with session_scope(self._session_factory) as session:
            row = session.get(StoreEntry, key)
            if row is not None:
                session.delete(row)

    def dispose(self) -> None:
        self.engine.dispose()


_app_store: SqlStore | None = None


def get_store() -> KeyValueStore:
    """Dependency for the app's local store, opened on first use."""
    global _app_store
    if _app_store is None:
        _app_store = SqlStore(settings.STORE_URL, echo=settings.DEBUG)
        _app_store.create_all()
    return _app_store
