import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from maajwtcheck.fetch import FetchError, get


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/ok":
            self._reply(200, b"hello world")
        elif self.path == "/echo":
            self._reply(200, self.headers.get("X-Probe", "").encode())
        elif self.path == "/redirect":
            self.send_response(302)
            self.send_header("Location", "/ok")
            self.send_header("Content-Length", "0")
            self.end_headers()
        elif self.path == "/nul":
            self._reply(200, b"before\0after")
        else:
            self._reply(404, b"missing")

    def _reply(self, status, body):
        self.send_response(status)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def server():
    srv = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=srv.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{srv.server_address[1]}"
    srv.shutdown()
    srv.server_close()


def test_get_returns_body(server):
    assert get(f"{server}/ok") == "hello world"


def test_get_sends_header(server):
    assert get(f"{server}/echo", "X-Probe: probe-value") == "probe-value"


def test_get_follows_redirect(server):
    assert get(f"{server}/redirect") == "hello world"


def test_get_returns_error_body(server):
    assert get(f"{server}/nothing") == "missing"


def test_get_stops_at_nul(server):
    assert get(f"{server}/nul") == "before"


def test_empty_url_raises():
    with pytest.raises(ValueError):
        get("")


def test_malformed_header_raises(server):
    with pytest.raises(ValueError):
        get(f"{server}/ok", "no colon here")


def test_unknown_scheme_raises():
    with pytest.raises(FetchError):
        get("notaurl")


def test_connection_refused_raises():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    with pytest.raises(FetchError):
        get(f"http://127.0.0.1:{port}/")