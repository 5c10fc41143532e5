# datagrid/database.py
import threading
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple

import structlog

from .exceptions import ConfigurationError, UninitializedStoreError

logger = structlog.get_logger(__name__)

Records = Tuple[Any, ...]
Generator = Callable[[], Sequence[Any]]


class StoreBackend:
    """Key/value holder for each entity type's working set."""

    def get(self, key: str) -> Optional[Records]:
        """Return the stored records, or None if the key was never loaded"""
        raise NotImplementedError

    def get_or_init(self, key: str) -> Records:
        """Return the stored records, generating them on first access"""
        raise NotImplementedError

    def replace(self, key: str, records: Sequence[Any]) -> None:
        """Overwrite the stored records"""
        raise NotImplementedError

    def mutate(self, key: str, fn: Callable[[Records], Sequence[Any]]) -> Records:
        """Atomically replace the stored records with fn(current)"""
        raise NotImplementedError


class RecordStore(StoreBackend):
    """
    Process-lifetime in-memory store.

    One instance is created when the application starts and handed to the
    services that need it. Sequences are held as tuples, so callers always
    get a snapshot that later mutations can't change underneath them.
    Initialisation and every read-modify-write run under a single lock.
    """

    def __init__(self, generators: Optional[Mapping[str, Generator]] = None):
        self._generators: Dict[str, Generator] = dict(generators or {})
        self._data: Dict[str, Records] = {}
        self._lock = threading.RLock()

    def register(self, key: str, generator: Generator) -> None:
        with self._lock:
            self._generators[key] = generator

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def get(self, key: str) -> Optional[Records]:
        return self._data.get(key)

    def get_or_init(self, key: str) -> Records:
        records = self._data.get(key)
        if records is not None:
            return records

        with self._lock:
            # another thread may have loaded it while we waited
            records = self._data.get(key)
            if records is not None:
                return records
            generator = self._generators.get(key)
            if generator is None:
                raise ConfigurationError(f"No generator registered for '{key}'")
            records = tuple(generator())
            self._data[key] = records
            logger.info("store_initialized", key=key, records=len(records))
            return records

    def replace(self, key: str, records: Sequence[Any]) -> None:
        with self._lock:
            self._data[key] = tuple(records)

    def mutate(self, key: str, fn: Callable[[Records], Sequence[Any]]) -> Records:
        with self._lock:
            current = self._data.get(key)
            if current is None:
                raise UninitializedStoreError(key)
            updated = tuple(fn(current))
            self._data[key] = updated
            return updated

    def clear(self, key: Optional[str] = None) -> None:
        with self._lock:
            if key is None:
                self._data.clear()
            else:
                self._data.pop(key, None)
