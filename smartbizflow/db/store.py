"""
JSON-file-backed record store

One JSON document holds every collection (one top-level key per collection,
each an array of flat records). The document is loaded once, served from
memory, and rewritten whole after every mutation. A failed rewrite undoes the
in-memory change before the error reaches the caller, so memory and disk
never disagree.
"""
import copy
import json
import logging
import os
import secrets
import string
import threading
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from smartbizflow.core.exceptions import (
    AppendOnlyCollectionError,
    NotFoundError,
    StoreInitError,
    StoreIOError,
    UnknownCollectionError,
)
from smartbizflow.db.seed import build_seed_document
from smartbizflow.models.registry import (
    COLLECTION_NAMES,
    COLLECTIONS,
    STORE_MANAGED_FIELDS,
    CollectionSpec,
)
from smartbizflow.utils.datetime_utils import iso_8601_utc, next_timestamp, now_utc
from smartbizflow.utils.json_serializer import sanitize_for_json

logger = logging.getLogger(__name__)

Record = Dict[str, Any]
Filters = Union[Mapping[str, Any], Callable[[Record], bool], None]

SEARCH_KEY = "search"
AUDIT_COLLECTION = "auditLogs"

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_SUFFIX_LENGTH = 9


def generate_id(prefix: str) -> str:
    """<prefix>-<epoch millis>-<9 random base36 chars>"""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_SUFFIX_LENGTH))
    return f"{prefix}-{time.time_ns() // 1_000_000}-{suffix}"


def _empty_document() -> Dict[str, List[Record]]:
    return {name: [] for name in COLLECTION_NAMES}


def _coerce_int(value: Any, default: Optional[int]) -> Optional[int]:
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _sort_key(value: Any):
    # Mixed value types in one field must still be orderable
    if isinstance(value, (int, float)):
        return (0, value, "")
    if isinstance(value, str):
        return (1, 0, value)
    return (2, 0, json.dumps(value, sort_keys=True))


def _matches_exact(record: Record, field: str, expected: Any) -> bool:
    actual = record.get(field)
    if isinstance(expected, (list, tuple, set, frozenset)):
        return actual in [sanitize_for_json(item) for item in expected]
    return actual == sanitize_for_json(expected)


def _matches_search(record: Record, fields, needle: str) -> bool:
    if fields:
        values = (record.get(field) for field in fields)
    else:
        values = (value for key, value in record.items() if key not in STORE_MANAGED_FIELDS)
    return any(isinstance(value, str) and needle in value.lower() for value in values)


class RecordStore:
    """
    Process-local record store over a single JSON data file.

    Construct one per application and pass it to whatever needs it; the
    application bootstrap owns `initialize()` / `close()`. Operations issued
    before `initialize()` or after `close()` (re)open the store lazily.
    Every public method holds an RLock for its whole read-modify-flush
    sequence, so a store instance can be shared between threads.
    """

    def __init__(
        self,
        path: Union[str, Path],
        *,
        seed_demo_data: bool = True,
        password_hasher: Optional[Callable[[str], str]] = None,
    ):
        self.path = Path(path)
        self.seed_demo_data = seed_demo_data
        self._password_hasher = password_hasher
        self._data: Dict[str, Any] = _empty_document()
        self._lock = threading.RLock()
        self._open = False

    def __enter__(self) -> "RecordStore":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._open

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """
        Load the data file, or create and seed it when it does not exist.

        Idempotent: calling it on an open store does nothing.

        Raises:
            StoreInitError: file unreadable, not valid JSON, wrong shape or not
                writable; directory cannot be created; first write fails
        """
        with self._lock:
            if self._open:
                return

            if self.path.exists():
                document = self._load(self.path)
                if not os.access(self.path, os.W_OK):
                    raise StoreInitError(f"Data file {self.path} is not writable")
                self._data = document
                logger.info("Record store loaded from %s", self.path)
            else:
                try:
                    self.path.parent.mkdir(parents=True, exist_ok=True)
                except OSError as e:
                    raise StoreInitError(f"Cannot create data directory {self.path.parent}: {e}") from e

                document = _empty_document()
                if self.seed_demo_data:
                    document.update(build_seed_document(self._hasher()))
                self._data = document
                try:
                    self._write_file(self._serialize())
                except OSError as e:
                    self._data = _empty_document()
                    raise StoreInitError(f"Cannot write data file {self.path}: {e}") from e
                if self.seed_demo_data:
                    logger.info("Record store initialized with sample data at %s", self.path)
                else:
                    logger.info("Record store initialized empty at %s", self.path)

            self._open = True

    def close(self) -> None:
        """Final flush. The store re-opens lazily if used again."""
        with self._lock:
            if not self._open:
                return
            self._flush()
            self._open = False
            logger.info("Record store closed (%s)", self.path)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_by_id(self, collection: str, record_id: str) -> Optional[Record]:
        """Return a copy of the record, or None when it does not exist"""
        with self._lock:
            self._ensure_open()
            records = self._records(collection)
            index = self._index_of(records, record_id)
            if index is None:
                return None
            return copy.deepcopy(records[index])

    def find_one(self, collection: str, **criteria: Any) -> Optional[Record]:
        """First record whose fields equal every criterion (insertion order)"""
        with self._lock:
            self._ensure_open()
            records = self._records(collection)
            for record in records:
                if all(_matches_exact(record, field, value) for field, value in criteria.items()):
                    return copy.deepcopy(record)
            return None

    def list(
        self,
        collection: str,
        filters: Filters = None,
        *,
        sort_by: Optional[str] = "createdAt",
        descending: bool = True,
        offset: Any = 0,
        limit: Any = None,
    ) -> List[Record]:
        """
        Return copies of the matching records.

        Args:
            collection: collection name
            filters: mapping of field -> expected value (a list/tuple/set means
                "any of"), plus an optional "search" key matched
                case-insensitively as a substring of the collection's search
                fields; or a callable predicate. None values and keys that
                are not fields of the collection impose no constraint. All
                criteria must hold.
            sort_by: field to order by (records missing it come last); None
                keeps insertion order
            descending: ordering direction, newest first by default
            offset: records to skip; negative means 0
            limit: maximum records to return; None or negative means no limit

        Returns:
            New list of record copies; empty when offset is past the end
        """
        with self._lock:
            self._ensure_open()
            spec = self._spec(collection)
            predicate = self._build_predicate(spec, filters)
            matches = [record for record in self._data[collection] if predicate(record)]

            if sort_by:
                present = [record for record in matches if record.get(sort_by) is not None]
                missing = [record for record in matches if record.get(sort_by) is None]
                present.sort(key=lambda record: _sort_key(record[sort_by]), reverse=descending)
                matches = present + missing

            start = max(_coerce_int(offset, 0), 0)
            size = _coerce_int(limit, None)
            if size is None or size < 0:
                window = matches[start:]
            else:
                window = matches[start:start + size]
            return copy.deepcopy(window)

    def count(self, collection: str, filters: Filters = None) -> int:
        with self._lock:
            self._ensure_open()
            spec = self._spec(collection)
            predicate = self._build_predicate(spec, filters)
            return sum(1 for record in self._data[collection] if predicate(record))

    def stats(self) -> Dict[str, int]:
        """Record count per collection"""
        with self._lock:
            self._ensure_open()
            return {name: len(self._data[name]) for name in COLLECTION_NAMES}

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, collection: str, data: Mapping[str, Any]) -> Record:
        """
        Insert a new record and persist the document.

        `id`, `createdAt` and `updatedAt` are assigned here; values supplied
        for them by the caller are discarded.

        Raises:
            StoreIOError: the write failed (the record is not kept in memory)
        """
        with self._lock:
            self._ensure_open()
            spec = self._spec(collection)
            if spec.append_only:
                raise AppendOnlyCollectionError(collection, "create")
            return self._append(spec, data, with_updated_at=True)

    def update(self, collection: str, record_id: str, changes: Mapping[str, Any]) -> Record:
        """
        Shallow-merge `changes` onto the record, refresh `updatedAt`, persist.

        Raises:
            NotFoundError: no record with that id
            StoreIOError: the write failed (the previous record is restored)
        """
        with self._lock:
            self._ensure_open()
            spec = self._spec(collection)
            if spec.append_only:
                raise AppendOnlyCollectionError(collection, "update")
            records = self._data[collection]
            index = self._index_of(records, record_id)
            if index is None:
                raise NotFoundError(collection, record_id)

            previous = records[index]
            updated = dict(previous)
            updated.update(self._clean(collection, changes))
            updated["updatedAt"] = next_timestamp(previous.get("updatedAt") or previous.get("createdAt"))
            records[index] = updated
            try:
                self._flush()
            except StoreIOError:
                records[index] = previous
                logger.error("Rolled back update of %s/%s after failed write", collection, record_id)
                raise
            return copy.deepcopy(updated)

    def delete(self, collection: str, record_id: str) -> bool:
        """
        Remove the record and persist. Returns False when the id does not exist.

        Raises:
            StoreIOError: the write failed (the record is put back)
        """
        with self._lock:
            self._ensure_open()
            spec = self._spec(collection)
            if spec.append_only:
                raise AppendOnlyCollectionError(collection, "delete")
            records = self._data[collection]
            index = self._index_of(records, record_id)
            if index is None:
                return False

            removed = records.pop(index)
            try:
                self._flush()
            except StoreIOError:
                records.insert(index, removed)
                logger.error("Rolled back delete of %s/%s after failed write", collection, record_id)
                raise
            return True

    def log_audit(self, entry: Mapping[str, Any]) -> Record:
        """Append an audit log entry (id and createdAt only; never updated or removed)"""
        with self._lock:
            self._ensure_open()
            return self._append(COLLECTIONS[AUDIT_COLLECTION], entry, with_updated_at=False)

    # ------------------------------------------------------------------
    # Backup / restore
    # ------------------------------------------------------------------

    def backup(self, destination: Union[str, Path]) -> Path:
        """Write the current document to another file"""
        destination = Path(destination)
        with self._lock:
            self._ensure_open()
            payload = self._serialize()
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            self._write_file(payload, destination)
        except OSError as e:
            raise StoreIOError(f"Failed to write backup {destination}: {e}") from e
        logger.info("Record store backed up to %s", destination)
        return destination

    def restore(self, source: Union[str, Path]) -> None:
        """
        Replace the whole document with the contents of another data file.

        Raises:
            StoreInitError: the source cannot be read or is not a valid document
            StoreIOError: the write failed (the previous document is kept)
        """
        source = Path(source)
        with self._lock:
            self._ensure_open()
            document = self._load(source)
            previous = self._data
            self._data = document
            try:
                self._flush()
            except StoreIOError:
                self._data = previous
                logger.error("Restore from %s rolled back after failed write", source)
                raise
            logger.info("Record store restored from %s", source)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ensure_open(self) -> None:
        if not self._open:
            self.initialize()

    def _hasher(self) -> Callable[[str], str]:
        if self._password_hasher is None:
            from smartbizflow.core.security import hash_password
            return hash_password
        return self._password_hasher

    def _spec(self, collection: str) -> CollectionSpec:
        spec = COLLECTIONS.get(collection)
        if spec is None:
            raise UnknownCollectionError(collection)
        return spec

    def _records(self, collection: str) -> List[Record]:
        self._spec(collection)
        return self._data[collection]

    @staticmethod
    def _index_of(records: List[Record], record_id: str) -> Optional[int]:
        for index, record in enumerate(records):
            if record.get("id") == record_id:
                return index
        return None

    @staticmethod
    def _build_predicate(spec: CollectionSpec, filters: Filters) -> Callable[[Record], bool]:
        if filters is None:
            return lambda record: True
        if callable(filters):
            return filters

        checks = []
        for key, expected in filters.items():
            if expected is None:
                continue
            if key == SEARCH_KEY:
                needle = str(expected).strip().lower()
                if needle:
                    checks.append(
                        lambda record, needle=needle: _matches_search(record, spec.search_fields, needle)
                    )
            elif key in spec.known_fields:
                checks.append(
                    lambda record, key=key, expected=expected: _matches_exact(record, key, expected)
                )
            else:
                logger.debug("Ignoring unknown filter key %r for %s", key, spec.name)
        return lambda record: all(check(record) for check in checks)

    def _clean(self, collection: str, data: Mapping[str, Any]) -> Record:
        payload = sanitize_for_json(data)
        if not isinstance(payload, dict):
            raise TypeError(f"Record data for '{collection}' must be a mapping")
        dropped = [field for field in STORE_MANAGED_FIELDS if field in payload]
        if dropped:
            logger.debug("Ignoring store-managed fields %s for %s", dropped, collection)
        return {key: value for key, value in payload.items() if key not in STORE_MANAGED_FIELDS}

    def _new_id(self, spec: CollectionSpec, records: List[Record]) -> str:
        while True:
            candidate = generate_id(spec.id_prefix)
            if self._index_of(records, candidate) is None:
                return candidate

    def _append(self, spec: CollectionSpec, data: Mapping[str, Any], with_updated_at: bool) -> Record:
        records = self._data[spec.name]
        stamp = iso_8601_utc(now_utc())
        record: Record = {"id": self._new_id(spec, records)}
        record.update(self._clean(spec.name, data))
        record["createdAt"] = stamp
        if with_updated_at:
            record["updatedAt"] = stamp

        records.append(record)
        try:
            self._flush()
        except StoreIOError:
            records.pop()
            logger.error("Rolled back create in %s after failed write", spec.name)
            raise
        return copy.deepcopy(record)

    def _load(self, path: Path) -> Dict[str, Any]:
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise StoreInitError(f"Cannot read data file {path}: {e}") from e
        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreInitError(f"Data file {path} is not valid JSON: {e}") from e

        if not isinstance(document, dict):
            raise StoreInitError(f"Data file {path} must contain a JSON object")
        for name in COLLECTION_NAMES:
            records = document.setdefault(name, [])
            if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
                raise StoreInitError(f"Collection '{name}' in {path} must be an array of objects")
        return document

    def _serialize(self) -> str:
        return json.dumps(self._data, indent=2, ensure_ascii=False)

    def _write_file(self, payload: str, target: Optional[Path] = None) -> None:
        target = target or self.path
        tmp_path = target.with_name(target.name + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, target)
        except OSError:
            if tmp_path.exists():
                tmp_path.unlink()
            raise

    def _flush(self) -> None:
        try:
            self._write_file(self._serialize())
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to write data file %s: %s", self.path, e)
            raise StoreIOError(f"Failed to write data file {self.path}: {e}") from e
