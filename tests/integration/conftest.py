"""Integration test fixtures.

Starts a blocker server in-process on a free port, backed by a temporary
directory, and provides an ``httpx.Client`` pointing at it.
"""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
import socket
import threading
import time

import httpx
import pytest

from blocker.config import Settings
from blocker.server.app import build_server
from blocker.store import FileStore


def _free_port() -> int:
    """Find a free TCP port on localhost."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def _wait_for_server(url: str, timeout: float = 30.0, interval: float = 0.5) -> None:
    """Block until *url* returns a 200 response or *timeout* is reached."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            r = httpx.get(url, timeout=3)
            if r.status_code == 200:
                return
        except (httpx.ConnectError, httpx.ReadError, httpx.TimeoutException):
            pass
        time.sleep(interval)
    raise TimeoutError(f"Server at {url} did not become ready within {timeout}s")


@pytest.fixture(scope="session")
def db_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    return tmp_path_factory.mktemp("db")


@pytest.fixture(scope="session")
def server_url(db_dir: Path) -> Generator[str, None, None]:
    """Start the server in-process and yield its base URL."""
    port = _free_port()
    url = f"http://127.0.0.1:{port}"

    settings = Settings(host="127.0.0.1", port=port, db_dir=db_dir, log_level="warning")
    server = build_server(settings)

    t = threading.Thread(
        target=server.run,
        kwargs={
            "host": settings.host,
            "port": settings.port,
            "log_level": settings.log_level,
            "generate_client_file": False,
        },
        daemon=True,
    )
    t.start()

    try:
        _wait_for_server(f"{url}/health")
        yield url
    finally:
        server._shutdown_event.set()
        t.join(timeout=10)


@pytest.fixture(scope="session")
def client(server_url: str) -> Generator[httpx.Client, None, None]:
    """Return an ``httpx.Client`` connected to the running test server."""
    with httpx.Client(base_url=server_url, timeout=30) as c:
        yield c


@pytest.fixture(scope="session")
def disk(db_dir: Path) -> FileStore:
    """Direct access to the server's storage directory."""
    return FileStore(db_dir)
