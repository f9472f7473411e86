from checkpoint.checker import Checker, new_checker
from checkpoint.core.exceptions import (
    CaptureError,
    CheckpointError,
    ConfigurationError,
    RequestConstructionError,
    UnsupportedRouterError,
)
from checkpoint.middleware.pipeline import MIDDLEWARE_FUNC, MiddlewarePipeline, compose
from checkpoint.request_execution.models import CheckConfig, Result, header
from checkpoint.routing import Router, RouterAdapter, ServeMux, as_router
from checkpoint.transport import HANDLER, Request, ResponseRecorder, ResponseWriter, new_request, write_error

__all__ = [
    "Checker",
    "new_checker",
    "CaptureError",
    "CheckpointError",
    "ConfigurationError",
    "RequestConstructionError",
    "UnsupportedRouterError",
    "MIDDLEWARE_FUNC",
    "MiddlewarePipeline",
    "compose",
    "CheckConfig",
    "Result",
    "header",
    "Router",
    "RouterAdapter",
    "ServeMux",
    "as_router",
    "HANDLER",
    "Request",
    "ResponseRecorder",
    "ResponseWriter",
    "new_request",
    "write_error",
]
