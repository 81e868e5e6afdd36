"""Tests for blocker.errors."""

import pytest

from blocker.errors import (
    BlobNotFoundError,
    BlockerError,
    EmptyBlobError,
    IntegrityError,
    MissingKeyError,
    PayloadTooLargeError,
    StorageError,
    TransportError,
)


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (MissingKeyError(), 400),
        (EmptyBlobError(), 400),
        (TransportError("boom"), 400),
        (PayloadTooLargeError(10), 413),
        (BlobNotFoundError("k"), 404),
        (StorageError("disk"), 500),
        (IntegrityError("k", "j"), 500),
    ],
)
def test_status_codes(error: BlockerError, status_code: int) -> None:
    assert isinstance(error, BlockerError)
    assert error.status_code == status_code


def test_integrity_is_not_not_found() -> None:
    assert not issubclass(IntegrityError, BlobNotFoundError)
    assert not issubclass(BlobNotFoundError, IntegrityError)


def test_not_found_carries_key() -> None:
    err = BlobNotFoundError("abc123")
    assert err.key == "abc123"
    assert "abc123" in str(err)


def test_integrity_carries_digests() -> None:
    err = IntegrityError("expected", "actual")
    assert err.key == "expected"
    assert err.actual == "actual"
    assert "expected" in str(err)
    assert "actual" in str(err)


def test_payload_too_large_carries_bound() -> None:
    err = PayloadTooLargeError(1024)
    assert err.max_size == 1024
    assert "1024" in str(err)
