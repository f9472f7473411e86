from typing import Awaitable, Callable, Protocol, runtime_checkable

from multidict import CIMultiDict

from checkpoint.transport.request import Request


@runtime_checkable
class ResponseWriter(Protocol):
    """
    Structural interface of a response sink. ResponseRecorder is the in-memory
    implementation; handlers and middleware only rely on this surface.
    """

    headers: CIMultiDict[str]

    def write_header(self, status: int) -> None: ...

    def write(self, data: bytes | str) -> int: ...


HANDLER = Callable[[Request, ResponseWriter], Awaitable[None]]
