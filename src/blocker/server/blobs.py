from fastapi import Request, Response, status
import litserve as ls
from starlette.concurrency import run_in_threadpool
from starlette.requests import ClientDisconnect

from blocker.errors import BlockerError, IntegrityError, TransportError
from blocker.service import MAX_BLOB_SIZE, BlobService
from blocker.store.base import BlobStore
from blocker.utils import logging


class BlobsLitApi:
    """Blob Web API: POST bytes to ``/blobs``, GET them back from ``/blobs/{key}``."""

    def __init__(self, store: BlobStore, max_blob_size: int = MAX_BLOB_SIZE) -> None:
        super().__init__()
        self.logger = logging.get_logger(__name__)
        self.service = BlobService(store, max_blob_size=max_blob_size)

    @property
    def store(self) -> BlobStore:
        return self.service.store

    def setup(self, server: ls.LitServer) -> None:
        self.logger.info("Initializing blob Web API on %s...", type(self.store).__name__)
        super().setup(server)  # ty:ignore[unresolved-attribute]
        self.logger.info("Blob Web API successfully initialized.")

    async def _read_body(self, request: Request) -> bytes:
        """Read the request body, giving up as soon as it outgrows a blob."""
        length = request.headers.get("content-length")
        if length is not None and length.isdigit():
            self.service.check_size(int(length))

        body = bytearray()
        try:
            async for chunk in request.stream():
                body.extend(chunk)
                self.service.check_size(len(body))
        except (ClientDisconnect, OSError) as exc:
            raise TransportError(f"Failed to read request body: {exc!r}") from exc
        return bytes(body)

    def _error(self, exc: BlockerError) -> Response:
        name = type(exc).__name__
        if isinstance(exc, IntegrityError):
            self.logger.critical("%s: %s", name, exc)
        elif isinstance(exc, TransportError) or exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            self.logger.error("%s: %s", name, exc)
        else:
            self.logger.info("%s: %s", name, exc)
        return Response(
            content=str(exc),
            status_code=exc.status_code,
            media_type="text/plain",
            headers={"X-Blocker-Error": name},
        )

    async def write(self, request: Request) -> Response:
        try:
            body = await self._read_body(request)
            result = await run_in_threadpool(self.service.ingest, body)
        except BlockerError as exc:
            return self._error(exc)
        return Response(
            content=result.key,
            status_code=status.HTTP_201_CREATED if result.created else status.HTTP_200_OK,
            media_type="text/plain",
        )

    async def read(self, request: Request, key: str | None = None) -> Response:
        try:
            data = await run_in_threadpool(self.service.retrieve, key)
        except BlockerError as exc:
            return self._error(exc)
        return Response(
            content=data,
            media_type="application/octet-stream",
            headers={"ETag": f'"{key}"'},
        )

    async def head(self, request: Request, response: Response, key: str) -> Response:
        if await run_in_threadpool(self.service.exists, key):
            response.status_code = status.HTTP_200_OK
            return response
        response.status_code = status.HTTP_404_NOT_FOUND
        return response
