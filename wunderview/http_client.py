"""Session factory for the Wunderlist REST API.

Every request carries the JSON content type and the two static credential
headers. Paths are resolved against a fixed base URL, so callers pass
``"lists"`` or ``"tasks/42"`` rather than full URLs. No retry adapter is
mounted: one call, one request.
"""

from urllib.parse import urljoin

import requests

WUNDERLIST_API_BASE = "https://a.wunderlist.com/api/v1/"


class BaseUrlSession(requests.Session):
    """requests.Session that joins relative request URLs onto ``base_url``."""

    def __init__(self, base_url: str):
        super().__init__()
        # urljoin drops the last path segment unless the base ends with "/"
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"

    def request(self, method, url, *args, **kwargs):
        return super().request(method, urljoin(self.base_url, url), *args, **kwargs)


def build_session(
    client_id: str,
    access_token: str,
    base_url: str = WUNDERLIST_API_BASE,
) -> BaseUrlSession:
    """Return a session authenticated with the given Wunderlist credentials."""
    session = BaseUrlSession(base_url)
    session.headers.update({
        "Content-Type": "application/json",
        "X-Client-ID": client_id,
        "X-Access-Token": access_token,
    })
    return session
