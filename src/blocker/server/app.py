import litserve as ls

from blocker.config import Settings
from blocker.server.api import BlockerAPI
from blocker.store import FileStore
from blocker.utils import logging

logger = logging.get_logger(__name__)


def build_server(settings: Settings) -> ls.LitServer:
    store = FileStore(settings.db_dir, cache_size_max=settings.cache_size_max)
    api = BlockerAPI(store)
    return ls.LitServer(
        api,
        accelerator="cpu",
        devices=1,
        workers_per_device=1,
        callbacks=None,
        middlewares=None,
    )


def run_server(settings: Settings) -> None:
    logging.set_level(settings.log_level)
    server = build_server(settings)
    logger.info("Starting server on %s:%d with data in %s", settings.host, settings.port, settings.db_dir)
    server.run(
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        generate_client_file=False,
    )
