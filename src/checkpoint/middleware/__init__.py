from checkpoint.middleware.pipeline import (
    MIDDLEWARE_FUNC,
    Middleware,
    MiddlewareFactory,
    MiddlewarePipeline,
    MiddlewareType,
    compose,
)
from checkpoint.middleware.common import (
    BasicAuthMiddleware,
    BearerTokenMiddleware,
    HeaderMiddleware,
)
from checkpoint.middleware.listeners import (
    LoggingMiddleware,
    RecoverMiddleware,
    TimingMiddleware,
)

__all__ = [
    "MIDDLEWARE_FUNC",
    "Middleware",
    "MiddlewareFactory",
    "MiddlewarePipeline",
    "MiddlewareType",
    "compose",
    "BasicAuthMiddleware",
    "BearerTokenMiddleware",
    "HeaderMiddleware",
    "LoggingMiddleware",
    "RecoverMiddleware",
    "TimingMiddleware",
]
