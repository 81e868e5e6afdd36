"""Typed errors for blocker.

Every error carries the HTTP status it is reported with, so the serving layer
can map failures without inspecting messages.
"""

from fastapi import status


class BlockerError(Exception):
    """Base exception for all blocker errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR


class MissingKeyError(BlockerError):
    """Raised when a read is requested without a key."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self) -> None:
        super().__init__("Must provide a key")


class EmptyBlobError(BlockerError):
    """Raised when an ingest carries no bytes."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self) -> None:
        super().__init__("Blob must not be empty")


class TransportError(BlockerError):
    """Raised when the request body cannot be read."""

    status_code = status.HTTP_400_BAD_REQUEST


class PayloadTooLargeError(BlockerError):
    """Raised when a blob exceeds the configured size bound."""

    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        super().__init__(f"Maximum blob size is {max_size} bytes")


class BlobNotFoundError(BlockerError):
    """Raised when a key has no stored blob."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Key not found: {key}")


class StorageError(BlockerError):
    """Raised when the backing store fails to read or write."""


class IntegrityError(BlockerError):
    """Raised when stored bytes no longer hash to the key they were filed under."""

    def __init__(self, key: str, actual: str) -> None:
        self.key = key
        self.actual = actual
        super().__init__(f"Data corrupted on disk: {key} hashes to {actual}")
