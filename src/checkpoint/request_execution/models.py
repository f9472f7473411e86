from __future__ import annotations
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable

from multidict import CIMultiDict, CIMultiDictProxy
from typing_extensions import Self
from yarl import URL

from checkpoint.core.exceptions import ConfigurationError
from checkpoint.middleware.pipeline import MIDDLEWARE_FUNC
from checkpoint.routing.adapters import as_router
from checkpoint.routing.base import Router
from checkpoint.transport.base import HANDLER


DEFAULT_METHOD = "GET"
DEFAULT_BODY = ""

HeaderPair = tuple[str, str]


def _route_path(target: str) -> str:
    """Path component of a request target. Unparseable targets are returned as given."""
    try:
        url = URL(target)
    except ValueError:
        return target
    return url.path or target


def header(key: str, value: str) -> HeaderPair:
    """Build a header pair for CheckConfig.with_headers."""
    return key, value


@dataclass
class CheckConfig:
    """
    Parameters of a single check.
    • router: routing engine the handler is registered with (adapted when needed)
    • handler: terminal handler, required
    • path: concrete request target, required
    • pattern: route pattern registered with the router, defaults to the
      path component of path (query string and fragment dropped)
    • method: HTTP method, defaults to GET
    • body: request body, defaults to empty
    • headers: request headers, the last write for a key wins
    • middlewares: handler wrappers, first declared is outermost

    Mutators return the config itself and may be called in any order.
    Validation happens in resolve(), which runs when the check is executed.
    """
    router: Router
    handler: HANDLER | None = None
    path: str = ""
    pattern: str | None = None
    method: str | None = None
    body: str | bytes | None = None
    headers: dict[str, str] = field(default_factory=dict)
    middlewares: list[MIDDLEWARE_FUNC] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.router = as_router(self.router)

    def with_handler(self, handler: HANDLER) -> Self:
        self.handler = handler
        return self

    def with_path(self, path: str) -> Self:
        self.path = path
        return self

    def with_pattern(self, pattern: str) -> Self:
        self.pattern = pattern
        return self

    def with_method(self, method: str) -> Self:
        self.method = method
        return self

    def with_body(self, body: str | bytes) -> Self:
        self.body = body
        return self

    def with_header(self, key: str, value: str) -> Self:
        self.headers[key] = value
        return self

    def with_headers(self, *headers: HeaderPair | Mapping[str, str]) -> Self:
        for item in headers:
            pairs = item.items() if isinstance(item, Mapping) else (item,)
            for key, value in pairs:
                self.headers[key] = value
        return self

    def with_middlewares(self, *middlewares: MIDDLEWARE_FUNC) -> Self:
        self.middlewares.extend(middlewares)
        return self

    def resolve(self) -> "ResolvedCheck":
        """
        Validate required fields and fill in defaults. This is the only place
        default values are applied.
        """
        if self.handler is None:
            raise ConfigurationError("route handler cannot be empty")
        if not self.path:
            raise ConfigurationError("url path cannot be empty")

        body = self.body if self.body is not None else DEFAULT_BODY
        if isinstance(body, str):
            body = body.encode("utf-8")

        return ResolvedCheck(
            router=self.router,
            handler=self.handler,
            path=self.path,
            pattern=self.pattern or _route_path(self.path),
            method=self.method or DEFAULT_METHOD,
            body=body,
            headers=tuple(self.headers.items()),
            middlewares=tuple(self.middlewares),
        )


@dataclass(frozen=True)
class ResolvedCheck:
    """A validated CheckConfig with every default applied."""
    router: Router
    handler: HANDLER
    path: str
    pattern: str
    method: str
    body: bytes
    headers: tuple[HeaderPair, ...] = ()
    middlewares: tuple[MIDDLEWARE_FUNC, ...] = ()


def _empty_headers() -> CIMultiDictProxy[str]:
    return CIMultiDictProxy(CIMultiDict())


@dataclass(frozen=True)
class Result:
    """
    Immutable snapshot of a captured response.
    • status_code: status written by the handler chain (200 when none was written)
    • headers: case-insensitive, one comma-joined value per header name
    • body: raw response body
    """
    status_code: int
    headers: CIMultiDictProxy[str] = field(default_factory=_empty_headers)
    body: bytes = b""

    def text(self, encoding: str = "utf-8") -> str:
        if not self.body:
            return ""
        return self.body.decode(encoding)

    def json(self, *, loads: Callable[[str], Any] = json.loads) -> Any:
        return loads(self.text())
