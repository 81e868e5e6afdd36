"""Filesystem-backed blob storage.

Blobs are stored one file per key in a sharded directory structure::

    root/ab/cd/abcdef1234567890...

The first ``depth`` blocks of ``width`` key characters each become
subdirectories, so no single directory ends up holding every blob. Recently
read blobs are kept in an in-process LRU cache bounded by total bytes. Writes
evict the key instead of caching it, so the next read comes from disk.
"""

from __future__ import annotations

from collections import OrderedDict
import os
from pathlib import Path
import tempfile
import threading
from typing import Any

from blocker.digest import in_alphabet
from blocker.errors import BlobNotFoundError, StorageError
from blocker.utils import logging

logger = logging.get_logger(__name__)


class FileStore:
    def __init__(
        self,
        root: str | Path = "db",
        *,
        depth: int = 2,
        width: int = 2,
        cache_size_max: int = 0,
    ) -> None:
        if depth < 0 or width < 1:
            raise ValueError("depth must be >= 0 and width >= 1")
        if cache_size_max < 0:
            raise ValueError("cache_size_max must be >= 0")
        self.root = Path(root)
        self.depth = depth
        self.width = width
        self.cache_size_max = cache_size_max
        self.root.mkdir(parents=True, exist_ok=True)
        self._cache: OrderedDict[str, bytes] = OrderedDict()
        self._cache_size = 0
        self._lock = threading.Lock()

    def __getstate__(self) -> dict[str, Any]:
        state = self.__dict__.copy()
        del state["_lock"]
        state["_cache"] = OrderedDict()
        state["_cache_size"] = 0
        return state

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._lock = threading.Lock()

    @property
    def cache_size(self) -> int:
        return self._cache_size

    def path(self, key: str) -> Path:
        """Return the file that holds ``key``."""
        parts = [key[i * self.width : (i + 1) * self.width] for i in range(self.depth)]
        return self.root.joinpath(*[p for p in parts if p], key)

    def has(self, key: str) -> bool:
        if not in_alphabet(key):
            return False
        with self._lock:
            if key in self._cache:
                return True
        return self.path(key).is_file()

    def read(self, key: str) -> bytes:
        if not in_alphabet(key):
            raise BlobNotFoundError(key)
        cached = self._cache_get(key)
        if cached is not None:
            return cached
        try:
            data = self.path(key).read_bytes()
        except FileNotFoundError as exc:
            raise BlobNotFoundError(key) from exc
        except OSError as exc:
            raise StorageError(f"Failed to read {key}: {exc}") from exc
        self._cache_put(key, data)
        return data

    def write(self, key: str, data: bytes) -> None:
        if not in_alphabet(key):
            raise StorageError(f"Refusing to store invalid key {key!r}")
        path = self.path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # Write beside the target and rename so readers never see a partial file.
            fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=".tmp-")
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(data)
                os.replace(tmp, path)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Failed to write {key}: {exc}") from exc
        self._cache_drop(key)
        logger.debug("Wrote %d bytes to %s", len(data), path)

    def _cache_get(self, key: str) -> bytes | None:
        with self._lock:
            data = self._cache.get(key)
            if data is not None:
                self._cache.move_to_end(key)
            return data

    def _cache_drop(self, key: str) -> None:
        with self._lock:
            previous = self._cache.pop(key, None)
            if previous is not None:
                self._cache_size -= len(previous)

    def _cache_put(self, key: str, data: bytes) -> None:
        with self._lock:
            previous = self._cache.pop(key, None)
            if previous is not None:
                self._cache_size -= len(previous)
            if len(data) > self.cache_size_max:
                return
            while self._cache and self._cache_size + len(data) > self.cache_size_max:
                _, evicted = self._cache.popitem(last=False)
                self._cache_size -= len(evicted)
            self._cache[key] = data
            self._cache_size += len(data)
