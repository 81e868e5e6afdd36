from collections.abc import Callable
from typing import Any

import litserve as ls
from litserve.specs.base import LitSpec

from blocker.server.blobs import BlobsLitApi
from blocker.service import MAX_BLOB_SIZE
from blocker.store.base import BlobStore
from blocker.utils import logging

logger = logging.get_logger(__name__)


class BlockerSpec(BlobsLitApi, LitSpec):
    def __init__(self, store: BlobStore, max_blob_size: int = MAX_BLOB_SIZE) -> None:
        super().__init__(store, max_blob_size=max_blob_size)
        self.api_path = "/blobs"
        self.add_endpoint("/blobs", self.write, ["POST"])
        self.add_endpoint("/blobs", self.read, ["GET"])
        self.add_endpoint("/blobs/{key}", self.read, ["GET"])
        self.add_endpoint("/blobs/{key}", self.head, ["HEAD"])

    def pre_setup(self, lit_api: ls.LitAPI) -> None:
        from blocker.server.api import BlockerAPI

        if not isinstance(lit_api, BlockerAPI):
            raise TypeError("LitAPI must be an instance of BlockerAPI.")

    def add_endpoint(self, path: str, endpoint: Callable, methods: list[str]) -> None:
        """Register an endpoint in the spec."""
        self._endpoints.append((path, endpoint, methods))

    @property
    def endpoints(self) -> list[tuple[str, Callable, list[str]]]:
        return self._endpoints.copy()

    # Abstract on LitSpec. The /blobs routes answer directly and never go
    # through the worker queue, so both hooks pass payloads through.
    def decode_request(self, request: Any, **kwargs: Any) -> Any:  # pyright: ignore [reportIncompatibleMethodOverride]
        """Pass raw payload bytes through to ``predict``."""
        return request

    def encode_response(self, output: Any, **kwargs: Any) -> Any:  # pyright: ignore [reportIncompatibleMethodOverride]
        logger.debug("spec out: %s", output)
        return output
