import litserve as ls

from blocker.digest import digest
from blocker.server.spec import BlockerSpec
from blocker.service import MAX_BLOB_SIZE
from blocker.store.base import BlobStore
from blocker.utils import logging


class BlockerAPI(ls.LitAPI):
    def __init__(self, store: BlobStore, max_blob_size: int = MAX_BLOB_SIZE) -> None:
        super().__init__(spec=BlockerSpec(store, max_blob_size=max_blob_size))
        self.logger = logging.get_logger(__name__)

    def setup(self, device: str) -> None:
        self.logger.debug("Blocker worker ready on %s.", device)

    def predict(self, x: bytes) -> str:
        """Digest a payload without storing it.

        LitAPI has no default predict. Blob routes are served by the spec and
        do not call it.
        """
        return digest(x)
