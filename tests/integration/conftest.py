"""
Integration Test Fixtures.

Fixtures for integration tests - real HTTP over a local socket.
A small threaded HTTP server stands in for the xApp manager and
records every request it receives.
"""

import json
import socket
import threading
from collections.abc import Generator
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any

import pytest


@dataclass
class RecordedRequest:
    method: str
    path: str
    body: str


@dataclass
class FakeAppManager:
    """Canned answers keyed by (method, path); everything else is 404."""

    host: str
    port: int
    routes: dict[tuple[str, str], tuple[int, Any]] = field(default_factory=dict)
    requests: list[RecordedRequest] = field(default_factory=list)

    def answer(self, method: str, path: str, status: int, body: Any = None) -> None:
        self.routes[(method, path)] = (status, body)

    @property
    def global_options(self) -> list[str]:
        return ["-h", self.host, "-p", str(self.port)]


def _make_handler(app: FakeAppManager) -> type[BaseHTTPRequestHandler]:
    class Handler(BaseHTTPRequestHandler):
        def _respond(self) -> None:
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length).decode("utf-8") if length else ""
            app.requests.append(RecordedRequest(self.command, self.path, body))

            status, payload = app.routes.get((self.command, self.path), (404, None))
            data = b"" if payload is None else json.dumps(payload).encode("utf-8")

            self.send_response(status)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(data)))
            self.end_headers()
            self.wfile.write(data)

        do_GET = do_POST = do_PUT = do_DELETE = _respond

        def log_message(self, format: str, *args: Any) -> None:
            pass

    return Handler


@pytest.fixture
def appmgr_server() -> Generator[FakeAppManager, None, None]:
    """
    Run a fake xApp manager on a free local port.

    Usage:
        def test_undeploy(runner, appmgr_server):
            appmgr_server.answer("DELETE", "/ric/v1/xapps/ueec", 204)
            result = runner.invoke(main, [*appmgr_server.global_options, "undeploy", "ueec"])
    """
    app = FakeAppManager(host="127.0.0.1", port=0)
    server = ThreadingHTTPServer(("127.0.0.1", 0), _make_handler(app))
    app.port = server.server_address[1]

    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield app
    server.shutdown()
    server.server_close()
    thread.join(timeout=5)


@pytest.fixture
def closed_port() -> int:
    """A local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
