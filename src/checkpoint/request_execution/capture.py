from collections.abc import Iterable

from multidict import CIMultiDict, CIMultiDictProxy

from checkpoint.core.exceptions import CaptureError
from checkpoint.request_execution.models import Result
from checkpoint.transport.recorder import ResponseRecorder


def join_headers(items: Iterable[tuple[str, str]]) -> CIMultiDictProxy[str]:
    """
    Merge repeated header names into one value joined with ", ", keeping the
    order the values were added in. The first spelling of a name is kept.
    """
    names: dict[str, str] = {}
    merged: dict[str, list[str]] = {}

    for key, value in items:
        name = names.setdefault(key.lower(), str(key))
        merged.setdefault(name, []).append(value)

    return CIMultiDictProxy(
        CIMultiDict((name, ", ".join(values)) for name, values in merged.items())
    )


def capture_result(recorder: ResponseRecorder) -> Result:
    """Copy status, headers and body out of the recorder into a Result."""
    headers = join_headers(recorder.header_snapshot().items())

    try:
        recorder.body.seek(0)
        body = recorder.body.read()
    except (OSError, ValueError) as e:
        raise CaptureError(f"failed to read response body: {e}") from e

    return Result(status_code=recorder.status_code, headers=headers, body=body)
