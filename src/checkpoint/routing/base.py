from typing import Protocol, runtime_checkable

from checkpoint.transport.base import HANDLER, ResponseWriter
from checkpoint.transport.request import Request


@runtime_checkable
class Router(Protocol):
    """
    A structural interface for a pluggable routing engine. A router maps
    patterns to handlers and dispatches an inbound request to the handler
    whose pattern matches it. How patterns are matched, and what happens when
    a pattern is registered twice, is left to the engine.
    """

    def register(self, pattern: str, handler: HANDLER) -> None:
        ...

    async def dispatch(self, request: Request, response: ResponseWriter) -> None:
        ...
