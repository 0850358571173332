"""Pytest configuration - loads .env and serves canned IGDB responses locally."""

import threading
import time
from collections.abc import Iterator
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, HTTPServer
from pathlib import Path

import pytest
from dotenv import load_dotenv

from igdb_cli.sdk import IGDBClient

# Load .env from project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

TEST_DATA_DIR = Path(__file__).parent / "test_data"
TEST_API_KEY = "test-key"


def read_test_file(name: str) -> str:
    """Read a canned response body from tests/test_data."""
    return (TEST_DATA_DIR / name).read_text(encoding="utf-8")


@dataclass
class RecordedRequest:
    """A request received by the fake server."""

    path: str
    headers: dict[str, str]


@dataclass
class FakeIGDB:
    """State of the fake IGDB server: the next response and the requests seen."""

    url: str = ""
    status: int = 200
    body: str = ""
    delay: float = 0.0
    requests: list[RecordedRequest] = field(default_factory=list)

    def respond(self, body: str, status: int = 200) -> None:
        self.body = body
        self.status = status

    def respond_file(self, name: str, status: int = 200) -> None:
        self.respond(read_test_file(name), status)


@pytest.fixture
def igdb_server() -> Iterator[FakeIGDB]:
    """Run a local HTTP server answering every GET with the configured body."""
    fake = FakeIGDB()

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:  # noqa: N802
            fake.requests.append(RecordedRequest(path=self.path, headers=dict(self.headers)))
            if fake.delay:
                time.sleep(fake.delay)
            payload = fake.body.encode("utf-8")
            self.send_response(fake.status)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            self.wfile.write(payload)

        def log_message(self, format: str, *args: object) -> None:
            pass

    server = HTTPServer(("127.0.0.1", 0), Handler)
    fake.url = f"http://127.0.0.1:{server.server_address[1]}/"
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield fake
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture
def client(igdb_server: FakeIGDB) -> IGDBClient:
    """IGDBClient pointed at the fake server."""
    return IGDBClient(api_key=TEST_API_KEY, base_url=igdb_server.url, timeout=5)
