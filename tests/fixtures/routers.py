import pytest
from aiohttp import web

from checkpoint import Request, ResponseWriter, ServeMux
from checkpoint.transport.base import HANDLER


class RecordingRouter:
    """Router that keeps every registration and dispatch for inspection."""

    def __init__(self) -> None:
        self.registered: list[tuple[str, HANDLER]] = []
        self.dispatched: list[Request] = []

    def register(self, pattern: str, handler: HANDLER) -> None:
        self.registered.append((pattern, handler))

    async def dispatch(self, request: Request, response: ResponseWriter) -> None:
        self.dispatched.append(request)
        _, handler = self.registered[-1]
        await handler(request, response)


class UnknownEngine:
    """A routing engine no adapter knows about."""

    def add(self, pattern: str, handler: HANDLER) -> None:
        pass


@pytest.fixture
def recording_router() -> RecordingRouter:
    return RecordingRouter()


@pytest.fixture
def mux() -> ServeMux:
    return ServeMux()


@pytest.fixture
def url_dispatcher() -> web.UrlDispatcher:
    return web.UrlDispatcher()
