"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - backend: Scripted fake backend served through httpx.MockTransport
    - backend_client: BackendClient wired to the fake backend
    - state: Fresh SessionState
    - controller: InteractionController over the fake backend
"""

import inspect
import json
from collections import defaultdict
from collections.abc import Awaitable, Callable

import httpx
import pytest

from pdfqa.client.backend import BackendClient
from pdfqa.models.schemas import FileHandle
from pdfqa.session.controller import InteractionController
from pdfqa.session.state import SessionState

BASE_URL = "http://backend.test"

Responder = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


class ScriptedBackend:
    """Fake backend answering each path from a queue of responders.

    Every request is recorded. Unscripted requests fail the test with a
    500 so they cannot pass silently.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responders: dict[str, list[Responder]] = defaultdict(list)
        self.transport = httpx.MockTransport(self._handle)

    def on(self, path: str, *responders: Responder) -> None:
        self._responders[path].extend(responders)

    def json(self, path: str, body: object, status_code: int = 200) -> None:
        self.on(path, lambda request: httpx.Response(status_code, json=body))

    def fail_connect(self, path: str, message: str = "connection refused") -> None:
        def raise_connect(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError(message, request=request)

        self.on(path, raise_connect)

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self._responders[request.url.path]
        if not queue:
            return httpx.Response(500, json={"detail": f"unscripted {request.url.path}"})
        response = queue.pop(0)(request)
        if inspect.isawaitable(response):
            response = await response
        return response


def uploaded_filename(request: httpx.Request) -> str:
    """Pull the multipart filename out of a recorded upload request."""
    body = request.content.decode("latin-1")
    marker = 'filename="'
    start = body.index(marker) + len(marker)
    return body[start : body.index('"', start)]


def query_payload(request: httpx.Request) -> dict:
    return json.loads(request.content)


def pdf(name: str) -> FileHandle:
    return FileHandle(name=name, content=b"%PDF-1.4\n" + name.encode(), content_type="application/pdf")


@pytest.fixture
def backend() -> ScriptedBackend:
    return ScriptedBackend()


@pytest.fixture
def backend_client(backend: ScriptedBackend) -> BackendClient:
    return BackendClient(BASE_URL, transport=backend.transport)


@pytest.fixture
def state() -> SessionState:
    return SessionState()


@pytest.fixture
def controller(backend_client: BackendClient, state: SessionState) -> InteractionController:
    return InteractionController(backend_client, state=state)
