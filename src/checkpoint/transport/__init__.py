from checkpoint.transport.base import HANDLER, ResponseWriter
from checkpoint.transport.recorder import ResponseRecorder, sniff_content_type, write_error
from checkpoint.transport.request import Request, new_request

__all__ = [
    "HANDLER",
    "ResponseWriter",
    "ResponseRecorder",
    "sniff_content_type",
    "write_error",
    "Request",
    "new_request",
]
