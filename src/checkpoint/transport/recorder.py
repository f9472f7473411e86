from __future__ import annotations
import io
import logging
from http import HTTPStatus

from multidict import CIMultiDict, CIMultiDictProxy

from checkpoint.transport.base import ResponseWriter


_BINARY_BYTES = frozenset(range(0x00, 0x09)) | {0x0B} | frozenset(range(0x0E, 0x1B)) | frozenset(range(0x1C, 0x20))
_HTML_PREFIXES = (b"<!doctype html", b"<html", b"<head", b"<body")


def sniff_content_type(data: bytes) -> str:
    """
    Best-effort content type for a body that was written without one.
    Distinguishes HTML, plain text and binary payloads only.
    """
    head = data[:512].lstrip(b"\t\n\x0c\r ")
    lowered = head.lower()

    if any(lowered.startswith(prefix) for prefix in _HTML_PREFIXES):
        return "text/html; charset=utf-8"

    if any(b in _BINARY_BYTES for b in head):
        return "application/octet-stream"

    return "text/plain; charset=utf-8"


class ResponseRecorder:
    """
    In-memory response sink.

    Headers may be changed until the status line is written. The first call
    to write_header() fixes the status code and takes a snapshot of the
    headers; later calls are ignored. write() implies a 200 status when no
    status was written yet.
    """

    def __init__(self) -> None:
        self.headers: CIMultiDict[str] = CIMultiDict()
        self.status_code: int = int(HTTPStatus.OK)
        self.body = io.BytesIO()
        self._wrote_header = False
        self._snapshot: CIMultiDictProxy[str] | None = None
        self._logger = logging.getLogger(f"[{self.__class__.__name__}]")

    @property
    def wrote_header(self) -> bool:
        return self._wrote_header

    def write_header(self, status: int) -> None:
        if self._wrote_header:
            self._logger.warning(
                f"superfluous write_header({status}) ignored, status already {self.status_code}"
            )
            return

        if not 100 <= status <= 999:
            raise ValueError(f"invalid status code {status}")

        self.status_code = int(status)
        self._wrote_header = True
        self._snapshot = CIMultiDictProxy(CIMultiDict(self.headers))

    def write(self, data: bytes | str) -> int:
        if isinstance(data, str):
            data = data.encode("utf-8")

        if not self._wrote_header:
            if data and "Content-Type" not in self.headers and "Transfer-Encoding" not in self.headers:
                self.headers["Content-Type"] = sniff_content_type(data)
            self.write_header(HTTPStatus.OK)

        return self.body.write(data)

    def header_snapshot(self) -> CIMultiDictProxy[str]:
        """Headers as they were when the status was written, or the live map if it never was."""
        if self._snapshot is not None:
            return self._snapshot
        return CIMultiDictProxy(CIMultiDict(self.headers))


def write_error(response: ResponseWriter, message: str, status: int) -> None:
    """Reply with a plain-text error message and the given status."""
    response.headers.popall("Content-Length", None)
    response.headers["Content-Type"] = "text/plain; charset=utf-8"
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.write_header(status)
    response.write(f"{message}\n")
