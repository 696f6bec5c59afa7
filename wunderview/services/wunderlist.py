"""Thin client for the Wunderlist REST API.

Each method performs exactly one request and returns the decoded JSON body
untouched. Lists and tasks are plain dicts; no response is cached.
"""

import logging
import math
import re
from decimal import Decimal
from functools import lru_cache

import requests

from wunderview.config import get_settings
from wunderview.exceptions import AuthenticationError, InvalidArgumentError, UnexpectedStatusError
from wunderview.http_client import build_session

logger = logging.getLogger(__name__)

# Same shape as PHP's is_numeric: sign, digits, fraction, exponent, ASCII only
NUMERIC_STRING = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*", re.ASCII)


def _numeric(value, message: str):
    """Return ``value`` normalised for use in a URL, or raise InvalidArgumentError."""
    if isinstance(value, bool):
        raise InvalidArgumentError(message)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return value
    if isinstance(value, str) and NUMERIC_STRING.fullmatch(value):
        return value.strip()
    raise InvalidArgumentError(message)


def _to_int(value) -> int:
    if isinstance(value, str):
        return int(Decimal(value))
    return int(value)


class WunderlistClient:
    def __init__(self, session: requests.Session):
        self.session = session

    def _decode(self, response: requests.Response, expected_status: int):
        logger.debug(
            "Wunderlist %s %s -> %s", response.request.method, response.url, response.status_code,
        )
        if response.status_code != expected_status:
            raise UnexpectedStatusError(response.status_code, expected_status)
        return response.json()

    def get_lists(self) -> list[dict]:
        """Return all lists visible to the authenticated user."""
        response = self.session.get("lists")
        return self._decode(response, expected_status=200)

    def get_list(self, list_id) -> dict:
        """Return a single list."""
        list_id = _numeric(list_id, "The list id must be numeric")
        response = self.session.get(f"lists/{list_id}")
        return self._decode(response, expected_status=200)

    def get_list_tasks(self, list_id) -> list[dict]:
        """Return all tasks of the given list."""
        list_id = _numeric(list_id, "The list id must be numeric")
        response = self.session.get("tasks", params={"list_id": list_id})
        return self._decode(response, expected_status=200)

    def create_task(self, name: str, list_id, parameters: dict | None = None) -> dict:
        """Create a task in a list.

        ``parameters`` holds any other task attributes accepted by the API
        (``due_date``, ``starred``, ...). ``name`` and ``listId`` always win over
        keys of the same name in ``parameters``.
        """
        list_id = _numeric(list_id, "The list id must be numeric")
        body = {**(parameters or {}), "name": name, "listId": list_id}
        response = self.session.post("tasks", json=body)
        return self._decode(response, expected_status=201)

    def complete_task(self, task_id, revision) -> dict:
        """Mark a task as completed. ``revision`` must match the task's current revision."""
        task_id = _numeric(task_id, "The task id must be numeric")
        revision = _numeric(revision, "The revision must be numeric")
        response = self.session.patch(
            f"tasks/{task_id}",
            json={"revision": _to_int(revision), "completed": True},
        )
        return self._decode(response, expected_status=200)


@lru_cache
def get_client() -> WunderlistClient:
    """Return the shared client built from the configured credentials."""
    settings = get_settings()
    if not settings.wunderlist_client_id or not settings.wunderlist_access_token:
        raise AuthenticationError(
            "Wunderlist credentials not configured. Set WUNDERLIST_CLIENT_ID and "
            "WUNDERLIST_ACCESS_TOKEN in .env"
        )
    session = build_session(
        settings.wunderlist_client_id,
        settings.wunderlist_access_token,
        settings.wunderlist_api_base,
    )
    return WunderlistClient(session)
