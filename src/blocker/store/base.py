"""Storage backend protocol for blob bytes."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class BlobStore(Protocol):
    """Protocol for blob storage backends.

    The service only ever needs existence checks, reads and writes, so any
    backend offering these three operations can sit underneath it.
    Implementations must be safe to call from several threads at once and
    must make a write visible to readers only once it is complete.

    Implementations include:
    - FileStore: key-sharded directories on the local filesystem
    - MemoryStore: in-process dict (for tests)
    """

    def has(self, key: str) -> bool:
        """Check whether ``key`` is stored. Never raises."""
        ...

    def read(self, key: str) -> bytes:
        """Load the bytes stored under ``key``.

        Raises:
            BlobNotFoundError: If nothing is stored under ``key``
            StorageError: If the backend fails to read
        """
        ...

    def write(self, key: str, data: bytes) -> None:
        """Store ``data`` under ``key``, replacing anything already there.

        Raises:
            StorageError: If the backend fails to write
        """
        ...
