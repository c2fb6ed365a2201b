import dataclasses
import json
import socket
import threading
import urllib.error
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from wrike.config import Config
from wrike.transport import (
    DEFAULT_TIMEOUT,
    HTTPClient,
    Request,
    base_url,
    new_request,
)


class _EchoHandler(BaseHTTPRequestHandler):
    def _respond(self):
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""
        payload = json.dumps(
            {
                "method": self.command,
                "path": self.path,
                "body": body.decode(),
                "auth": self.headers.get("Authorization"),
                "ctype": self.headers.get("Content-Type"),
            }
        ).encode()
        self.send_response(404 if self.path.startswith("/missing") else 200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    do_GET = do_POST = do_PUT = do_DELETE = _respond

    def log_message(self, *args):
        pass


@pytest.fixture
def server():
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _EchoHandler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{httpd.server_address[1]}"
    finally:
        httpd.shutdown()
        httpd.server_close()


def test_base_url_uses_default_host():
    assert base_url(Config("token", "")) == "https://app-eu.wrike.com/api/v4"


def test_base_url_uses_given_host():
    url = base_url(Config("token", "api.example.com"))
    assert url.startswith("https://api.example.com/")
    assert url.endswith("/api/v4")


def test_new_request_sets_url_and_headers():
    config = Config("token", "")
    request = new_request(config, "GET", "/account", None)
    assert request.method == "GET"
    assert request.url == "https://app-eu.wrike.com/api/v4/account"
    assert request.headers["Authorization"] == "bearer token"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert request.body is None


def test_new_request_encodes_text_body():
    request = new_request(Config("token", ""), "POST", "/groups", "title=Test")
    assert request.body == "title=Test".encode()


def test_new_request_rejects_invalid_method():
    with pytest.raises(ValueError):
        new_request(Config("token", ""), "BAD METHOD", "/account", None)
    with pytest.raises(ValueError):
        new_request(Config("token", ""), "", "/account", None)


def test_client_default_timeout():
    assert HTTPClient().timeout == DEFAULT_TIMEOUT


def test_client_sends_request(server):
    prepared = new_request(Config("token", ""), "PUT", "/api/v4/account", "a=1")
    request = dataclasses.replace(prepared, url=server + "/api/v4/account")
    echoed = json.loads(HTTPClient(timeout=5).do(request))
    assert echoed["method"] == "PUT"
    assert echoed["path"] == "/api/v4/account"
    assert echoed["body"] == "a=1"
    assert echoed["auth"] == "bearer token"
    assert echoed["ctype"] == "application/x-www-form-urlencoded"


def test_client_returns_body_of_error_response(server):
    request = Request(method="DELETE", url=server + "/missing/thing")
    echoed = json.loads(HTTPClient(timeout=5).do(request))
    assert echoed["method"] == "DELETE"
    assert echoed["path"] == "/missing/thing"


def test_client_raises_when_unreachable():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    request = Request(method="GET", url=f"http://127.0.0.1:{port}/")
    with pytest.raises(urllib.error.URLError):
        HTTPClient(timeout=5).do(request)