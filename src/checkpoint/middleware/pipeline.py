from enum import Enum
from typing import Callable, Iterable, Protocol

from checkpoint.core.abstract_factory import TypeAbstractFactory
from checkpoint.transport.base import HANDLER


MIDDLEWARE_FUNC = Callable[[HANDLER], HANDLER]


class MiddlewareType(str, Enum):
    HEADER = "header"
    BASIC_AUTH = "basic_auth"
    BEARER = "bearer"
    LOGGING = "logging"
    TIMING = "timing"
    RECOVER = "recover"


class Middleware(Protocol):
    """
    Middleware wraps a handler and returns a new handler. The returned handler
    may change the request before delegating, observe or rewrite the response
    afterwards, or answer on its own without calling the wrapped handler.
    """

    def __call__(self, next_handler: HANDLER) -> HANDLER:
        """
        Args:
            next_handler: Handler (or inner middleware) to delegate to.

        Returns:
            The wrapping handler.
        """
        ...


class MiddlewareFactory(TypeAbstractFactory[MiddlewareType, Middleware]):
    """Registry for Middleware components"""
    ...


def compose(handler: HANDLER, middlewares: Iterable[MIDDLEWARE_FUNC]) -> HANDLER:
    """
    Fold the middleware onto the handler from the last element to the first,
    so the first middleware in the list is the outermost wrapper: it sees the
    request first and the response last.
    """
    composed = handler
    for middleware in reversed(list(middlewares)):
        composed = middleware(composed)
    return composed


class MiddlewarePipeline:
    """
    Ordered collection of handler-wrapping middleware. The declared order is
    the order in which middleware observe the inbound request.
    """

    def __init__(self, middlewares: Iterable[MIDDLEWARE_FUNC] | None = None) -> None:
        self._middleware_list: list[MIDDLEWARE_FUNC] = list(middlewares or [])

    def __len__(self) -> int:
        return len(self._middleware_list)

    def add(self, middleware: MIDDLEWARE_FUNC) -> None:
        self._middleware_list.append(middleware)

    def extend(self, middlewares: Iterable[MIDDLEWARE_FUNC]) -> None:
        self._middleware_list.extend(middlewares)

    def wrap(self, terminal_handler: HANDLER) -> HANDLER:
        """Return a single handler equivalent to running the pipeline then terminal_handler."""
        return compose(terminal_handler, self._middleware_list)
