"""Unit test fixtures.

Mounts the blob endpoints on a bare FastAPI app so handlers can be exercised
with ``TestClient`` without starting litserve workers.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from blocker.server.spec import BlockerSpec
from blocker.store import MemoryStore


@pytest.fixture()
def max_blob_size() -> int:
    return 64


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def spec(store: MemoryStore, max_blob_size: int) -> BlockerSpec:
    return BlockerSpec(store, max_blob_size=max_blob_size)


@pytest.fixture()
def client(spec: BlockerSpec) -> TestClient:
    app = FastAPI()
    for path, endpoint, methods in spec.endpoints:
        app.add_api_route(path, endpoint=endpoint, methods=methods)
    return TestClient(app)
