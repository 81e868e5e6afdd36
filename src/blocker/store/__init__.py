"""Storage backends for blob bytes.

This package groups together the key/value stores the service can sit on:
- `BlobStore`: the `has`/`read`/`write` protocol every backend satisfies.
- `FileStore`: key-sharded filesystem storage with a hot-blob cache.
- `MemoryStore`: a dict-backed store for tests and ephemeral use.
"""

from blocker.store.base import BlobStore
from blocker.store.file import FileStore
from blocker.store.memory import MemoryStore

__all__ = ["BlobStore", "FileStore", "MemoryStore"]
