"""Tests for the low-level HTTP client and its error classification."""

import socket
import urllib.error
import urllib.request

import pytest
from conftest import TEST_API_KEY, FakeIGDB

from igdb_cli.core.client import APIClient, APIError, InvalidJSONError


@pytest.fixture
def api(igdb_server: FakeIGDB) -> APIClient:
    return APIClient(api_key=TEST_API_KEY, base_url=igdb_server.url, timeout=5)


def test_sends_credentials_and_accept_headers(api: APIClient, igdb_server: FakeIGDB) -> None:
    igdb_server.respond('[{"id": 1}]')
    assert api.get(f"{api.root_url}games/1") == [{"id": 1}]

    request = igdb_server.requests[0]
    assert request.path == "/games/1"
    headers = {k.lower(): v for k, v in request.headers.items()}
    assert headers["user-key"] == TEST_API_KEY
    assert headers["accept"] == "application/json"


def test_root_url_gets_trailing_slash() -> None:
    assert APIClient(api_key="k", base_url="https://api.example.com").root_url == "https://api.example.com/"


def test_env_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IGDB_API_KEY", "from-env")
    monkeypatch.setenv("IGDB_BASE_URL", "https://proxy.example.com/igdb")
    api = APIClient()
    assert api.api_key == "from-env"
    assert api.root_url == "https://proxy.example.com/igdb/"


def test_missing_api_key(monkeypatch: pytest.MonkeyPatch, igdb_server: FakeIGDB) -> None:
    monkeypatch.delenv("IGDB_API_KEY", raising=False)
    api = APIClient(base_url=igdb_server.url)
    with pytest.raises(APIError):
        api.get(f"{api.root_url}games/1")
    assert igdb_server.requests == []


@pytest.mark.parametrize("body", ["", "   ", "{not json", "[1, 2"])
def test_invalid_json(api: APIClient, igdb_server: FakeIGDB, body: str) -> None:
    igdb_server.respond(body)
    with pytest.raises(InvalidJSONError):
        api.get(f"{api.root_url}games/1")


def test_get_list_rejects_objects(api: APIClient, igdb_server: FakeIGDB) -> None:
    igdb_server.respond('{"count": 3}')
    with pytest.raises(InvalidJSONError):
        api.get_list(f"{api.root_url}games/")


def test_http_error_with_json_body(api: APIClient, igdb_server: FakeIGDB) -> None:
    igdb_server.respond('{"message": "Authentication failed"}', status=403)
    with pytest.raises(APIError) as exc_info:
        api.get(f"{api.root_url}games/1")

    error = exc_info.value
    assert not isinstance(error, InvalidJSONError)
    assert error.status == 403
    assert error.message == "Authentication failed"
    assert error.to_dict()["status"] == 403


def test_http_error_with_plain_body(api: APIClient, igdb_server: FakeIGDB) -> None:
    igdb_server.respond("Internal Server Error", status=500)
    with pytest.raises(APIError) as exc_info:
        api.get(f"{api.root_url}games/1")
    assert exc_info.value.status == 500


def test_connection_error() -> None:
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]

    api = APIClient(api_key=TEST_API_KEY, base_url=f"http://127.0.0.1:{port}/", timeout=5)
    with pytest.raises(APIError) as exc_info:
        api.get(f"{api.root_url}games/1")
    assert exc_info.value.message.startswith("Connection error")


@pytest.mark.parametrize(("timeout", "expected"), [(None, 5), (0, 0), (0.5, 0.5)])
def test_request_timeout(monkeypatch: pytest.MonkeyPatch, timeout: float | None, expected: float) -> None:
    seen: list[float] = []

    def fake_urlopen(req: urllib.request.Request, timeout: float) -> None:
        seen.append(timeout)
        raise urllib.error.URLError("down")

    monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)
    api = APIClient(api_key=TEST_API_KEY, base_url="http://127.0.0.1:1/", timeout=5)
    with pytest.raises(APIError):
        api.get(f"{api.root_url}games/1", timeout=timeout)
    assert seen == [expected]
