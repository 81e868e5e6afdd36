"""In-memory blob store for testing.

Thread-safe, and deliberately dumb: it stores whatever it is given under
whatever key it is given, which lets tests plant corrupted data.
"""

import threading
from typing import Any

from blocker.errors import BlobNotFoundError


class MemoryStore:
    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}
        self._lock = threading.Lock()
        self.writes = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __getstate__(self) -> dict[str, Any]:
        state = self.__dict__.copy()
        del state["_lock"]
        return state

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._lock = threading.Lock()

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def read(self, key: str) -> bytes:
        with self._lock:
            data = self._data.get(key)
        if data is None:
            raise BlobNotFoundError(key)
        return data

    def write(self, key: str, data: bytes) -> None:
        with self._lock:
            self._data[key] = bytes(data)
            self.writes += 1
