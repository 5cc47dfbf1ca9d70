from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

from kitdispenser.client.client import DispenserClient, DispenserClientError


class MockResponse:
    def __init__(self, status_code, json_data=None, chunks=None):
        self.status_code = status_code
        self._json = json_data
        self._chunks = chunks or []

    def json(self):
        if self._json is None:
            raise ValueError("no body")
        return self._json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=self)

    def iter_content(self, chunk_size=1):
        return iter(self._chunks)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def session() -> Mock:
    return Mock(spec=requests.Session)


@pytest.fixture
def client(session: Mock) -> DispenserClient:
    return DispenserClient(server_url="http://localhost:8080/", session=session)


def test_client_initialization(client: DispenserClient) -> None:
    """Test client initialization."""
    assert client.server_url == "http://localhost:8080"
    assert client.timeout > 0


def test_dispense_success(client: DispenserClient, session: Mock) -> None:
    session.get.return_value = MockResponse(
        200, {"success": True, "zip_name": "devkit_kitA-NVIDIA-v2_abc.zip"}
    )
    resp = client.dispense("kitA-NVIDIA-v2")
    assert resp.zip_name == "devkit_kitA-NVIDIA-v2_abc.zip"
    args, kwargs = session.get.call_args
    assert args[0] == "http://localhost:8080/dispense"
    assert kwargs["params"] == {"slug": "kitA-NVIDIA-v2"}


def test_dispense_error(client: DispenserClient, session: Mock) -> None:
    session.get.return_value = MockResponse(
        500,
        {"success": False, "error": "No available license files.", "code": "pool_exhausted"},
    )
    with pytest.raises(DispenserClientError) as exc:
        client.dispense("kitB-AMD-v1")
    assert exc.value.status_code == 500  # noqa: PLR2004
    assert exc.value.code == "pool_exhausted"
    assert str(exc.value) == "No available license files."


def test_dispense_error_without_body(client: DispenserClient, session: Mock) -> None:
    session.get.return_value = MockResponse(502)
    with pytest.raises(DispenserClientError) as exc:
        client.dispense("kitB-AMD-v1")
    assert exc.value.status_code == 502  # noqa: PLR2004


def test_download(client: DispenserClient, session: Mock, tmp_path: Path) -> None:
    session.get.return_value = MockResponse(200, chunks=[b"PK", b"\x03\x04"])
    path = client.download("devkit_x.zip", tmp_path / "out")
    assert path == tmp_path / "out" / "devkit_x.zip"
    assert path.read_bytes() == b"PK\x03\x04"


def test_fetch(client: DispenserClient, session: Mock, tmp_path: Path) -> None:
    session.get.side_effect = [
        MockResponse(200, {"success": True, "zip_name": "devkit_y.zip"}),
        MockResponse(200, chunks=[b"zip-bytes"]),
    ]
    path = client.fetch("kitA-NVIDIA-v2", tmp_path)
    assert path.read_bytes() == b"zip-bytes"
    assert session.get.call_args_list[1].args[0] == "http://localhost:8080/builds/devkit_y.zip"


def test_health(client: DispenserClient, session: Mock) -> None:
    session.get.return_value = MockResponse(200, {"status": "ok", "timestamp": 1})
    assert client.health()["status"] == "ok"


def test_default_session_is_requests_session() -> None:
    client = DispenserClient(server_url="http://localhost:1")
    assert isinstance(client.session, requests.Session)
