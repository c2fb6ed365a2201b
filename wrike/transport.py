"""HTTP requests to the Wrike API."""

from __future__ import annotations

import string
import urllib.error
import urllib.request
from dataclasses import dataclass, field

from wrike.config import Config

API_ROOT_PATH = "api"
API_VERSION = "v4"
DEFAULT_TIMEOUT = 10.0

_TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~")


@dataclass
class Request:
    """An HTTP request ready to be sent."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


class HTTPClient:
    """Sends requests and returns the raw response body."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    def do(self, request: Request) -> bytes:
        """Send ``request`` and return the response body, whatever its status."""
        native = urllib.request.Request(
            request.url,
            data=request.body,
            headers=dict(request.headers),
            method=request.method,
        )
        try:
            with urllib.request.urlopen(native, timeout=self.timeout) as response:
                return response.read()
        except urllib.error.HTTPError as err:
            with err:
                return err.read()


def base_url(config: Config) -> str:
    """Return the root URL of the API for ``config``."""
    return f"https://{config.api_host}/{API_ROOT_PATH}/{API_VERSION}"


def new_request(
    config: Config, method: str, path: str, body: str | bytes | None = None
) -> Request:
    """Build an authorised form request for ``path`` below the API root."""
    if not method or not set(method) <= _TOKEN_CHARS:
        raise ValueError(f"invalid method {method!r}")
    if isinstance(body, str):
        body = body.encode("utf-8")
    headers = {
        "Authorization": f"bearer {config.api_access_token}",
        "Content-Type": "application/x-www-form-urlencoded",
    }
    return Request(method=method, url=base_url(config) + path, headers=headers, body=body)