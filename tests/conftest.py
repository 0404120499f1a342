"""Pytest configuration - local mock API server and fixture loading."""

import json
import threading
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any

import pytest

from edgegrid_client import ClientConfig, EdgeGridClient

TESTDATA = Path(__file__).parent / "testdata"


def load_fixture(name: str) -> str:
    """Read a JSON fixture from tests/testdata."""
    return (TESTDATA / name).read_text()


def load_fixture_json(name: str) -> Any:
    return json.loads(load_fixture(name))


# =============================================================================
# Mock API Server
# =============================================================================


@dataclass
class RecordedRequest:
    """A request received by the mock server."""

    method: str
    path: str
    headers: dict[str, str]
    body: bytes = b""

    def json(self) -> Any:
        return json.loads(self.body.decode("utf-8"))


@dataclass
class MockAPIServer:
    """Serves one canned response and records every request it receives."""

    url: str = ""
    status: int = 200
    body: str | bytes = ""
    requests: list[RecordedRequest] = field(default_factory=list)

    def respond(self, status: int, body: str | bytes = "") -> None:
        self.status = status
        self.body = body

    def handler_class(self) -> type[BaseHTTPRequestHandler]:
        server = self

        class Handler(BaseHTTPRequestHandler):
            def _handle(self) -> None:
                length = int(self.headers.get("Content-Length") or 0)
                server.requests.append(
                    RecordedRequest(
                        method=self.command,
                        path=self.path,
                        headers={k.lower(): v for k, v in self.headers.items()},
                        body=self.rfile.read(length) if length else b"",
                    )
                )
                payload = server.body if isinstance(server.body, bytes) else server.body.encode("utf-8")
                self.send_response(server.status)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(payload)))
                self.end_headers()
                if payload:
                    self.wfile.write(payload)

            do_GET = _handle
            do_POST = _handle
            do_PUT = _handle
            do_DELETE = _handle

            def log_message(self, format: str, *args: Any) -> None:
                pass

        return Handler


@pytest.fixture
def mock_server():
    """Start a mock API server on an ephemeral port."""
    state = MockAPIServer()
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), state.handler_class())
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    state.url = f"http://127.0.0.1:{httpd.server_address[1]}"
    yield state
    httpd.shutdown()
    httpd.server_close()
    thread.join(timeout=5)


@pytest.fixture
def client(mock_server) -> EdgeGridClient:
    """Client pointed at the mock server."""
    return EdgeGridClient(ClientConfig(base_url=mock_server.url, timeout=5))
