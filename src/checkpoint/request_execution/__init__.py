from checkpoint.request_execution.executor import CheckExecutor
from checkpoint.request_execution.capture import capture_result, join_headers
from checkpoint.request_execution.models import (
    DEFAULT_BODY,
    DEFAULT_METHOD,
    CheckConfig,
    HeaderPair,
    ResolvedCheck,
    Result,
    header,
)

__all__ = [
    "CheckExecutor",
    "capture_result",
    "join_headers",
    "DEFAULT_BODY",
    "DEFAULT_METHOD",
    "CheckConfig",
    "HeaderPair",
    "ResolvedCheck",
    "Result",
    "header",
]
