"""
Generic collection access over a key-value store.

Each collection is a JSON list saved under one key. Every operation
reloads the list, so two services sharing a store always see each
other's writes. Store failures are logged and masked: a failed read
behaves like an empty collection and a failed write is dropped.
Stored records that no longer validate are skipped one by one.
"""
import logging
from typing import Any, Callable, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .storage import KeyValueStore, generate_id

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class RecordCollection(Generic[R]):
    def __init__(self, store: KeyValueStore, key: str, model: Type[R]):
        self.store = store
        self.key = key
        self.model = model

    # ---------- raw access ----------

    def load(self) -> List[R]:
        try:
            raw = self.store.load(self.key, [])
        except Exception:
            logger.exception("Error loading collection %s", self.key)
            return []
        if not isinstance(raw, list):
            logger.error("Collection %s is not a list; treating as empty", self.key)
            return []

        records: List[R] = []
        for item in raw:
            try:
                records.append(self.model.model_validate(item))
            except ValidationError as e:
                logger.error("Skipping invalid record in %s: %s", self.key, e)
        return records

    def save(self, records: List[R]) -> None:
        try:
            payload: List[Any] = [r.model_dump(mode="json", by_alias=True) for r in records]
            self.store.save(self.key, payload)
        except Exception:
            logger.exception("Error saving collection %s", self.key)

    def _checked(self, record: R) -> Optional[R]:
        """Re-run validation on a record that may have been mutated after creation."""
        try:
            return self.model.model_validate(record.model_dump())
        except ValidationError as e:
            logger.error("Rejected invalid %s record %s: %s", self.key, record.id, e)
            return None

    # ---------- uniform operations ----------

    def get_all(self) -> List[R]:
        return self.load()

    def get_by_id(self, record_id: str) -> Optional[R]:
        for record in self.load():
            if record.id == record_id:
                return record
        return None

    def add(self, fields: BaseModel, **extra: Any) -> R:
        records = self.load()
        record = self.model.model_validate(
            {**fields.model_dump(), **extra, "id": generate_id()}
        )
        records.append(record)
        self.save(records)
        return record

    def update(self, record: R) -> Optional[R]:
        """Replace the stored record with the same id. Invalid records are not written."""
        checked = self._checked(record)
        if checked is None:
            return None
        records = self.load()
        for i, existing in enumerate(records):
            if existing.id == checked.id:
                records[i] = checked
                self.save(records)
                return checked
        return None

    def modify(self, record_id: str, change: Callable[[R], None]) -> Optional[R]:
        """Apply ``change`` to the stored record in place and persist it."""
        records = self.load()
        for i, record in enumerate(records):
            if record.id == record_id:
                change(record)
                checked = self._checked(record)
                if checked is None:
                    return None
                records[i] = checked
                self.save(records)
                return checked
        return None

    def delete(self, record_id: str) -> None:
        records = self.load()
        kept = [r for r in records if r.id != record_id]
        if len(kept) != len(records):
            self.save(kept)

    def filter(self, predicate: Callable[[R], bool]) -> List[R]:
        return [r for r in self.load() if predicate(r)]
