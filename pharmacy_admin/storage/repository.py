from __future__ import annotations

import copy
import threading
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from ..exceptions import ConflictError, InvalidRecordError, NotAllowedError, NotFoundError, PersistenceError
from .json_store import JsonStore

Record = Dict[str, Any]

CREATED_AT = "createdAt"
UPDATED_AT = "updatedAt"


def utcnow() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T10:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class IdentityGenerator:
    """Issues ``<prefix>-<epoch-millis>`` values that never repeat within a process."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_millis(self) -> int:
        with self._lock:
            now = int(self._clock() * 1000)
            self._last = max(now, self._last + 1)
            return self._last

    def generate(self, prefix: str, taken=()) -> str:
        key = f"{prefix}-{self.next_millis()}"
        while key in taken:
            key = f"{prefix}-{self.next_millis()}"
        return key


identities = IdentityGenerator()

# fixed field copied from the body only when the body carries it
NO_DEFAULT = object()


def _identity(value):
    """``value`` when it can serve as a record identity (string or number), else None."""
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return value
    return None


class Repository:
    """CRUD over one JSON collection: a list of records kept in insertion order.

    ``fields`` maps the fixed fields of a record to the value used when the body
    leaves them empty (or to ``NO_DEFAULT``). When it is ``None`` the record is
    free-form and the whole request body is kept.
    ``base`` holds defaults that the body may override (e.g. an order's status).
    ``merge_fields`` restricts which fields an update may change.
    """

    def __init__(
        self,
        store: JsonStore,
        collection: str,
        label: str,
        *,
        key_field: str = "id",
        id_prefix: Optional[str] = None,
        fields: Optional[Dict[str, Any]] = None,
        base: Optional[Record] = None,
        merge_fields: Optional[List[str]] = None,
        deletable: bool = True,
        conflict_message: Optional[str] = None,
    ):
        self.store = store
        self.collection = collection
        self.label = label
        self.key_field = key_field
        self.id_prefix = id_prefix or label.lower()
        self.fields = fields
        self.base = base or {}
        self.merge_fields = merge_fields
        self.deletable = deletable
        self.conflict_message = conflict_message or f"{label} ID already exists"

    def __repr__(self):
        return f"<Repository {self.collection} key={self.key_field}>"

    # ---- internals ----

    def _load(self) -> List[Record]:
        data = self.store.load(self.collection, default=[])
        return data if isinstance(data, list) else []

    def _persist(self, records: List[Record], action: str):
        if not self.store.save(self.collection, records):
            raise PersistenceError(
                f"Failed to {action} {self.label.lower()}",
                context={"collection": self.collection},
            )

    def _index_of(self, records: List[Record], key: str) -> int:
        for i, rec in enumerate(records):
            if isinstance(rec, dict) and rec.get(self.key_field) == key:
                return i
        raise NotFoundError(self.label, key)

    def _build(self, key: str, body: Record) -> Record:
        record: Record = {self.key_field: key}
        if self.fields is None:
            record.update(self.base)
            record.update(body)
        else:
            for name, default in self.fields.items():
                if default is NO_DEFAULT:
                    if name in body:
                        record[name] = body[name]
                else:
                    record[name] = body.get(name) or default
        record[self.key_field] = key
        record.pop(CREATED_AT, None)
        record[CREATED_AT] = utcnow()
        return record

    def _merge(self, existing: Record, body: Record) -> Record:
        updated = dict(existing)
        for name, value in body.items():
            if name in (self.key_field, CREATED_AT):
                continue
            if self.merge_fields is not None and name not in self.merge_fields:
                continue
            updated[name] = value
        updated[UPDATED_AT] = utcnow()
        return updated

    # ---- operations ----

    def list(self) -> List[Record]:
        return self._load()

    def get(self, key: str) -> Record:
        records = self._load()
        return records[self._index_of(records, key)]

    def create(self, body: Record) -> Record:
        body = body or {}
        with self.store.lock(self.collection):
            records = self._load()
            taken = {_identity(r.get(self.key_field)) for r in records if isinstance(r, dict)}
            key = body.get(self.key_field)
            if not key:
                key = identities.generate(self.id_prefix, taken)
            elif _identity(key) is None:
                raise InvalidRecordError(f"Invalid {self.label} ID", context={"key": repr(key)})
            if key in taken:
                raise ConflictError(self.conflict_message, context={"key": key})
            record = self._build(key, body)
            records.append(record)
            self._persist(records, "create")
        return record

    def update(self, key: str, body: Record) -> Record:
        with self.store.lock(self.collection):
            records = self._load()
            index = self._index_of(records, key)
            records[index] = self._merge(records[index], body or {})
            self._persist(records, "update")
        return records[index]

    def delete(self, key: str) -> Record:
        if not self.deletable:
            raise NotAllowedError(f"{self.label} records cannot be deleted")
        with self.store.lock(self.collection):
            records = self._load()
            index = self._index_of(records, key)
            deleted = records.pop(index)
            self._persist(records, "delete")
        return deleted


class SettingsRepository:
    """The settings singleton: a single object, replaced wholesale on write."""

    collection = "settings"

    def __init__(self, store: JsonStore, defaults: Record):
        self.store = store
        self.defaults = defaults

    def get(self) -> Any:
        settings = self.store.load(self.collection)
        # null, false, 0 and "" count as unset; {} and [] are kept
        if not settings and not isinstance(settings, (dict, list)):
            return copy.deepcopy(self.defaults)
        return settings

    def put(self, body: Any) -> Any:
        with self.store.lock(self.collection):
            if not self.store.save(self.collection, body):
                raise PersistenceError("Failed to update settings")
        return body
