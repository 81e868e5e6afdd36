"""Tests for MemoryStore."""

import pickle

import pytest

from blocker.errors import BlobNotFoundError
from blocker.store import BlobStore, MemoryStore


def test_is_blob_store() -> None:
    assert isinstance(MemoryStore(), BlobStore)


def test_write_and_read() -> None:
    store = MemoryStore()
    store.write("key", b"value")
    assert store.has("key")
    assert store.read("key") == b"value"
    assert len(store) == 1


def test_read_missing_raises() -> None:
    store = MemoryStore()
    assert not store.has("missing")
    with pytest.raises(BlobNotFoundError) as exc_info:
        store.read("missing")
    assert exc_info.value.key == "missing"


def test_write_overwrites() -> None:
    store = MemoryStore()
    store.write("key", b"one")
    store.write("key", b"two")
    assert store.read("key") == b"two"
    assert store.writes == 2


def test_pickles_without_lock() -> None:
    store = MemoryStore()
    store.write("key", b"value")
    clone = pickle.loads(pickle.dumps(store))
    assert clone.read("key") == b"value"
    clone.write("other", b"x")
    assert clone.has("other")
