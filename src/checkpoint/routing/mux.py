from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from urllib.parse import unquote

from checkpoint.core.exceptions import ConfigurationError
from checkpoint.transport.base import HANDLER, ResponseWriter
from checkpoint.transport.recorder import write_error
from checkpoint.transport.request import Request


_WILDCARD = re.compile(r"^\{([A-Za-z_][A-Za-z0-9_]*)(\.\.\.)?\}$")


class PatternEnding(str, Enum):
    EXACT = "exact"        # /a/b
    SUBTREE = "subtree"    # /a/b/
    ANCHORED = "anchored"  # /a/b/{$}
    REMAINDER = "remainder"  # /a/{rest...}


@dataclass(frozen=True)
class Segment:
    value: str
    wildcard: bool = False


@dataclass(frozen=True)
class RoutePattern:
    """
    Parsed form of "[METHOD ]/path". Literal segments match verbatim,
    {name} matches one non-empty segment, a trailing {name...} matches the
    rest of the path, a trailing slash matches the whole subtree and a
    trailing /{$} matches only the path ending in a slash.
    """
    raw: str
    method: str | None
    segments: tuple[Segment, ...]
    ending: PatternEnding
    remainder: str | None = None

    @classmethod
    def parse(cls, raw: str) -> "RoutePattern":
        text = raw.strip()
        method: str | None = None

        if text and not text.startswith("/"):
            method, _, text = text.partition(" ")
            text = text.lstrip()

        if not text.startswith("/"):
            raise ConfigurationError(f"invalid pattern {raw!r}: path must start with '/'")

        parts = text[1:].split("/")
        ending = PatternEnding.EXACT
        remainder = None

        last = parts[-1]
        if last == "":
            ending = PatternEnding.SUBTREE
            parts = parts[:-1]
        elif last == "{$}":
            ending = PatternEnding.ANCHORED
            parts = parts[:-1]
        else:
            m = _WILDCARD.match(last)
            if m and m.group(2):
                ending = PatternEnding.REMAINDER
                remainder = m.group(1)
                parts = parts[:-1]

        segments: list[Segment] = []
        names: set[str] = set()
        for part in parts:
            m = _WILDCARD.match(part)
            if m:
                if m.group(2):
                    raise ConfigurationError(f"invalid pattern {raw!r}: {{{m.group(1)}...}} must be last")
                name = m.group(1)
                if name in names:
                    raise ConfigurationError(f"invalid pattern {raw!r}: duplicate wildcard {name!r}")
                names.add(name)
                segments.append(Segment(name, wildcard=True))
            elif "{" in part or "}" in part:
                raise ConfigurationError(f"invalid pattern {raw!r}: bad wildcard segment {part!r}")
            else:
                segments.append(Segment(part))

        if remainder is not None and remainder in names:
            raise ConfigurationError(f"invalid pattern {raw!r}: duplicate wildcard {remainder!r}")

        return cls(raw=raw, method=method, segments=tuple(segments), ending=ending, remainder=remainder)

    @property
    def key(self) -> tuple[str | None, str]:
        path = "/" + "/".join(
            "{}" if s.wildcard else s.value for s in self.segments
        )
        return self.method, f"{path}|{self.ending.value}"

    def specificity(self) -> tuple[int, int, int, int]:
        literals = sum(1 for s in self.segments if not s.wildcard)
        ending_rank = {
            PatternEnding.EXACT: 3,
            PatternEnding.ANCHORED: 3,
            PatternEnding.REMAINDER: 1,
            PatternEnding.SUBTREE: 0,
        }[self.ending]
        return literals, len(self.segments), ending_rank, int(self.method is not None)

    def match_path(self, parts: list[str]) -> dict[str, str] | None:
        if len(parts) < len(self.segments):
            return None

        params: dict[str, str] = {}
        for segment, part in zip(self.segments, parts):
            if segment.wildcard:
                if part == "":
                    return None
                params[segment.value] = part
            elif segment.value != part:
                return None

        rest = parts[len(self.segments):]
        if self.ending is PatternEnding.EXACT and rest:
            return None
        if self.ending is PatternEnding.SUBTREE and not rest:
            return None
        if self.ending is PatternEnding.ANCHORED and rest != [""]:
            return None
        if self.ending is PatternEnding.REMAINDER:
            if not rest:
                return None
            params[self.remainder] = "/".join(rest)

        return params

    def allows(self, method: str) -> bool:
        if self.method is None:
            return True
        if self.method == method:
            return True
        return self.method == "GET" and method == "HEAD"


@dataclass
class _Route:
    pattern: RoutePattern
    handler: HANDLER


class ServeMux:
    """
    Native router: implements register/dispatch directly. Matched wildcards
    are exposed through request.path_params / request.path_value(name).

    Registering a pattern equal to an existing one replaces the earlier
    handler. Unmatched paths get a 404 and paths matched only under other
    methods get a 405 carrying an Allow header.
    """

    def __init__(self) -> None:
        self._routes: dict[tuple[str | None, str], _Route] = {}
        self._logger = logging.getLogger(f"[{self.__class__.__name__}]")

    def __len__(self) -> int:
        return len(self._routes)

    @property
    def patterns(self) -> list[str]:
        return [route.pattern.raw for route in self._routes.values()]

    def register(self, pattern: str, handler: HANDLER) -> None:
        parsed = RoutePattern.parse(pattern)
        if parsed.key in self._routes:
            self._logger.warning(f"Pattern {pattern!r} already registered, replacing handler")
        self._routes[parsed.key] = _Route(pattern=parsed, handler=handler)

    @staticmethod
    def _split(request: Request) -> list[str]:
        return [unquote(part) for part in request.url.raw_path[1:].split("/")]

    def match(self, request: Request) -> tuple[_Route | None, dict[str, str], set[str]]:
        """
        Return the most specific route for the request, its wildcard values
        and, when no route allows the method, the methods that would match.
        """
        parts = self._split(request)
        best: tuple[_Route, dict[str, str]] | None = None
        allowed: set[str] = set()

        for route in self._routes.values():
            params = route.pattern.match_path(parts)
            if params is None:
                continue
            if not route.pattern.allows(request.method):
                allowed.add(route.pattern.method)
                if route.pattern.method == "GET":
                    allowed.add("HEAD")
                continue
            if best is None or route.pattern.specificity() > best[0].pattern.specificity():
                best = (route, params)

        if best is None:
            return None, {}, allowed
        return best[0], best[1], set()

    async def dispatch(self, request: Request, response: ResponseWriter) -> None:
        route, params, allowed = self.match(request)

        if route is None:
            if allowed:
                response.headers["Allow"] = ", ".join(sorted(allowed))
                write_error(response, HTTPStatus.METHOD_NOT_ALLOWED.phrase, HTTPStatus.METHOD_NOT_ALLOWED)
            else:
                write_error(response, "404 page not found", HTTPStatus.NOT_FOUND)
            return

        request.path_params = params
        await route.handler(request, response)
