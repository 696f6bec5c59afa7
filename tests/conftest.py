import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from wunderview.services.wunderlist import WunderlistClient


# --- Canned API responses ---

WUNDERLIST_LIST = {
    "id": 7,
    "title": "Groceries",
    "list_type": "list",
    "revision": 12,
    "created_at": "2024-01-01T00:00:00.000Z",
}

WUNDERLIST_TASK = {
    "id": 1,
    "title": "Buy milk",
    "list_id": 7,
    "completed": False,
    "revision": 3,
}


def make_response(status_code: int = 200, body=None) -> MagicMock:
    """Fake requests.Response whose json() returns a fresh copy of ``body``."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.url = "https://a.wunderlist.com/api/v1/"
    resp.json.side_effect = lambda: _copy(body)
    return resp


def _copy(body):
    if isinstance(body, list):
        return [dict(item) for item in body]
    if isinstance(body, dict):
        return dict(body)
    return body


@pytest.fixture
def mock_session():
    return MagicMock()


@pytest.fixture
def wunderlist(mock_session):
    """WunderlistClient over a mocked session."""
    return WunderlistClient(mock_session)


@pytest.fixture
def mock_client(mocker):
    """Mocked client returned by get_client() in both routers."""
    client = MagicMock()
    mocker.patch("wunderview.routers.wunderlist.get_client", return_value=client)
    mocker.patch("wunderview.routers.views.get_client", return_value=client)
    return client


@pytest.fixture
def api_client():
    """FastAPI TestClient for router tests."""
    from wunderview.main import api
    return TestClient(api)
