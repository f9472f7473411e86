from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from http import HTTPStatus
from typing import Any

from aiohttp import hdrs, web
from aiohttp.test_utils import make_mocked_request
from multidict import CIMultiDict

from checkpoint.core.abstract_factory import TypeKeyedFactory
from checkpoint.core.exceptions import UnsupportedRouterError
from checkpoint.routing.base import Router
from checkpoint.transport.base import HANDLER, ResponseWriter
from checkpoint.transport.recorder import write_error
from checkpoint.transport.request import Request


class RouterBackend(ABC):
    """
    Translates the register/dispatch capability onto one third-party routing
    engine's native API.
    """

    def __init__(self, engine: Any) -> None:
        self.engine = engine

    @abstractmethod
    def register(self, pattern: str, handler: HANDLER) -> None:
        ...

    @abstractmethod
    async def dispatch(self, request: Request, response: ResponseWriter) -> None:
        ...


class RouterBackendFactory(TypeKeyedFactory[RouterBackend]):
    """Registry of RouterBackend implementations keyed by engine type"""
    ...


@RouterBackendFactory.register(web.UrlDispatcher)
class AiohttpDispatcherBackend(RouterBackend):
    """
    Drives an aiohttp UrlDispatcher. Routes are added for every method; the
    dispatcher resolves a mocked aiohttp request built from the in-memory
    request and the native UrlMappingMatchInfo is exposed to handlers as
    request.match_info.

    aiohttp refuses a second route for a pattern that is already registered
    and raises RuntimeError, unlike ServeMux which replaces the handler.
    """

    REQUEST_KEY = "checkpoint.request"
    RESPONSE_KEY = "checkpoint.response"

    def __init__(self, engine: web.UrlDispatcher) -> None:
        super().__init__(engine)
        self._dispatcher = engine

    def register(self, pattern: str, handler: HANDLER) -> None:
        request_key = self.REQUEST_KEY
        response_key = self.RESPONSE_KEY

        async def endpoint(native: web.Request) -> None:
            await handler(native[request_key], native[response_key])

        self._dispatcher.add_route(hdrs.METH_ANY, pattern, endpoint)

    async def dispatch(self, request: Request, response: ResponseWriter) -> None:
        native = make_mocked_request(
            request.method,
            request.raw_path,
            headers=CIMultiDict(request.headers),
        )
        native[self.REQUEST_KEY] = request
        native[self.RESPONSE_KEY] = response

        match_info = await self._dispatcher.resolve(native)
        http_exception = match_info.http_exception
        if http_exception is not None:
            allow = http_exception.headers.get(hdrs.ALLOW)
            if allow:
                response.headers[hdrs.ALLOW] = allow
            write_error(response, http_exception.text or http_exception.reason, http_exception.status)
            return

        request.match_info = match_info
        await match_info.handler(native)


@RouterBackendFactory.register(web.Application)
class AiohttpApplicationBackend(AiohttpDispatcherBackend):
    """Drives the router owned by an aiohttp Application."""

    def __init__(self, engine: web.Application) -> None:
        super().__init__(engine.router)
        self.engine = engine


class RouterAdapter:
    """
    Wraps a routing engine whose native API differs from Router. The backend
    for the engine's concrete type is resolved once, when the adapter is
    built.

    register() on an engine with no backend raises UnsupportedRouterError.
    dispatch() on such an engine answers 500 instead of raising, so the
    mismatch shows up in the captured response.
    """

    def __init__(self, engine: Any) -> None:
        self.engine = engine
        backend_type = RouterBackendFactory.get(type(engine))
        self._backend: RouterBackend | None = backend_type(engine) if backend_type else None
        self._logger = logging.getLogger(f"[{self.__class__.__name__}]")

    def __repr__(self) -> str:
        return f"RouterAdapter({type(self.engine).__name__})"

    @property
    def supported(self) -> bool:
        return self._backend is not None

    def register(self, pattern: str, handler: HANDLER) -> None:
        if self._backend is None:
            raise UnsupportedRouterError(self.engine)
        self._backend.register(pattern, handler)

    async def dispatch(self, request: Request, response: ResponseWriter) -> None:
        if self._backend is None:
            self._logger.error(f"Unsupported router type {type(self.engine).__name__}")
            write_error(response, "Unsupported router type", HTTPStatus.INTERNAL_SERVER_ERROR)
            return
        await self._backend.dispatch(request, response)


def as_router(engine: Any) -> Router:
    """Return engine unchanged when it already satisfies Router, else wrap it in a RouterAdapter."""
    if isinstance(engine, Router):
        return engine
    return RouterAdapter(engine)
