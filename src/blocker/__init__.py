"""Content-addressable blob storage over HTTP."""

from blocker.__about__ import __version__
from blocker.service import MAX_BLOB_SIZE, BlobService, IngestResult

__all__ = ["MAX_BLOB_SIZE", "BlobService", "IngestResult", "__version__"]
