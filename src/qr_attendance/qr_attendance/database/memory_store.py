from __future__ import annotations

import threading
from typing import Callable, Dict, Generic, Hashable, List, Mapping, Optional, TypeVar

from ..core.exceptions import DuplicateKeyError

T = TypeVar("T")


class InMemoryCollection(Generic[T]):
    """Process-local collection with one or more unique indexes.

    Used when STORAGE_BACKEND=memory. Every unique index is checked and
    updated under a single lock, so `insert` is an atomic insert-if-absent.
    Data is lost on restart.
    """

    def __init__(self, name: str, unique_keys: Mapping[str, Callable[[T], Hashable]]):
        if not unique_keys:
            raise ValueError("at least one unique key is required")
        self._name = name
        self._key_funcs = dict(unique_keys)
        self._indexes: Dict[str, Dict[Hashable, T]] = {key: {} for key in self._key_funcs}
        self._rows: List[T] = []
        self._lock = threading.Lock()

    def insert(self, record: T) -> T:
        with self._lock:
            keys = {key: func(record) for key, func in self._key_funcs.items()}
            for key, value in keys.items():
                if value in self._indexes[key]:
                    raise DuplicateKeyError(self._name, key)
            for key, value in keys.items():
                self._indexes[key][value] = record
            self._rows.append(record)
            return record

    def get(self, key: str, value: Hashable) -> Optional[T]:
        with self._lock:
            return self._indexes[key].get(value)

    def find(self, predicate: Callable[[T], bool]) -> List[T]:
        with self._lock:
            rows = list(self._rows)
        return [r for r in rows if predicate(r)]

    def all(self) -> List[T]:
        with self._lock:
            return list(self._rows)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)
