from __future__ import annotations
import io
import json
import re
from collections.abc import Mapping
from typing import Any, Callable

from multidict import CIMultiDict, MultiDictProxy
from yarl import URL

from checkpoint.core.exceptions import RequestConstructionError


# RFC 9110 token characters, the only characters allowed in a method name
_METHOD_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_ALLOWED_SCHEMES = ("http", "https")


class Request:
    """
    In-memory HTTP request handed to handlers and middleware.

    • method: HTTP method, as given (case is preserved)
    • url: parsed request target
    • headers: case-insensitive header map; assignment replaces every value of a key
    • content: body stream, read once through read()/text()/json()
    • path_params: parameters populated by ServeMux
    • match_info: native match object populated by router adapters
    • state: scratch space shared by middleware and the handler
    """

    def __init__(
        self,
        method: str,
        url: URL,
        headers: Mapping[str, str] | None = None,
        body: bytes = b"",
    ) -> None:
        self.method = method
        self.url = url
        self.headers: CIMultiDict[str] = CIMultiDict(headers or {})
        self.content = io.BytesIO(body)
        self.path_params: dict[str, str] = {}
        self.match_info: Mapping[str, str] = {}
        self.state: dict[str, Any] = {}
        self._content_length = len(body)
        self._read_bytes: bytes | None = None

    def __repr__(self) -> str:
        return f"<Request {self.method} {self.raw_path}>"

    @property
    def path(self) -> str:
        return self.url.path

    @property
    def raw_path(self) -> str:
        """Encoded path plus query string, as it would appear on the request line."""
        return self.url.raw_path_qs

    @property
    def query(self) -> MultiDictProxy[str]:
        return self.url.query

    @property
    def host(self) -> str:
        return self.headers.get("Host") or self.url.host or "example.com"

    @property
    def content_length(self) -> int:
        return self._content_length

    def path_value(self, name: str) -> str:
        """Return the path parameter bound to `name`, or an empty string."""
        return self.path_params.get(name, "")

    async def read(self) -> bytes:
        if self._read_bytes is None:
            self._read_bytes = self.content.read()
        return self._read_bytes

    async def text(self, encoding: str = "utf-8") -> str:
        body = await self.read()
        return body.decode(encoding)

    async def json(self, *, loads: Callable[[str], Any] = json.loads) -> Any:
        body = await self.text()
        return loads(body)


def _parse_target(target: str) -> URL:
    if not target:
        raise RequestConstructionError("request target cannot be empty")

    if any(ch <= " " or ch == "\x7f" for ch in target):
        raise RequestConstructionError(f"invalid control character or space in URL: {target!r}")

    try:
        url = URL(target)
    except (ValueError, TypeError) as e:
        raise RequestConstructionError(f"malformed request target {target!r}: {e}") from e

    if url.is_absolute():
        if url.scheme not in _ALLOWED_SCHEMES:
            raise RequestConstructionError(f"unsupported protocol scheme {url.scheme!r}")
    elif not target.startswith("/"):
        raise RequestConstructionError(f"request target must start with '/': {target!r}")

    return url


def new_request(
    method: str,
    target: str,
    body: str | bytes = b"",
    headers: Mapping[str, str] | None = None,
) -> Request:
    """
    Build an in-memory request.

    Raises RequestConstructionError when the method is not a valid token or
    the target cannot be parsed as an origin-form path or an http(s) URL.
    """
    if not _METHOD_TOKEN.fullmatch(method or ""):
        raise RequestConstructionError(f"invalid method {method!r}")

    url = _parse_target(target)

    if isinstance(body, str):
        body = body.encode("utf-8")

    request = Request(method=method, url=url, body=body)

    for key, value in (headers or {}).items():
        request.headers[key] = value

    return request
