"""Content-addressed put/get over a `BlobStore`.

`BlobService` owns the addressing protocol: size bounds and deduplication on
the way in, digest verification on the way out. Persistence is entirely the
store's business.
"""

from pydantic.dataclasses import dataclass

from blocker.digest import digest
from blocker.errors import (
    BlobNotFoundError,
    BlockerError,
    EmptyBlobError,
    IntegrityError,
    MissingKeyError,
    PayloadTooLargeError,
    StorageError,
)
from blocker.store.base import BlobStore
from blocker.utils import logging

MiB = 1 << 20

MAX_BLOB_SIZE = 64 * MiB


@dataclass(frozen=True)
class IngestResult:
    key: str
    created: bool


class BlobService:
    def __init__(self, store: BlobStore, max_blob_size: int = MAX_BLOB_SIZE) -> None:
        if max_blob_size < 1:
            raise ValueError("max_blob_size must be >= 1")
        self.store = store
        self.max_blob_size = max_blob_size
        self.logger = logging.get_logger(__name__)

    def check_size(self, size: int) -> None:
        """Raise `PayloadTooLargeError` if ``size`` bytes would not fit in a blob."""
        if size > self.max_blob_size:
            raise PayloadTooLargeError(self.max_blob_size)

    def ingest(self, body: bytes) -> IngestResult:
        """Store ``body`` under its digest unless it is already stored.

        Identical content is assumed identical to what is on disk, so a dedup
        hit neither rewrites nor re-verifies the stored copy.
        """
        self.check_size(len(body))
        if not body:
            raise EmptyBlobError()

        key = digest(body)
        if self.store.has(key):
            self.logger.debug("Dedup hit for %s", key)
            return IngestResult(key=key, created=False)

        try:
            self.store.write(key, body)
        except BlockerError:
            raise
        except Exception as exc:
            raise StorageError(f"Failed to write {key}: {exc}") from exc
        self.logger.debug("Stored %d bytes as %s", len(body), key)
        return IngestResult(key=key, created=True)

    def retrieve(self, key: str | None) -> bytes:
        """Return the verified bytes stored under ``key``."""
        if not key:
            raise MissingKeyError()

        try:
            data = self.store.read(key)
        except BlockerError:
            raise
        except KeyError as exc:
            raise BlobNotFoundError(key) from exc
        except Exception as exc:
            raise StorageError(f"Failed to read {key}: {exc}") from exc

        actual = digest(data)
        if actual != key:
            raise IntegrityError(key, actual)
        return data

    def exists(self, key: str) -> bool:
        return bool(key) and self.store.has(key)
