from checkpoint.routing.base import Router
from checkpoint.routing.mux import PatternEnding, RoutePattern, Segment, ServeMux
from checkpoint.routing.adapters import (
    AiohttpApplicationBackend,
    AiohttpDispatcherBackend,
    RouterAdapter,
    RouterBackend,
    RouterBackendFactory,
    as_router,
)

__all__ = [
    "Router",
    "PatternEnding",
    "RoutePattern",
    "Segment",
    "ServeMux",
    "AiohttpApplicationBackend",
    "AiohttpDispatcherBackend",
    "RouterAdapter",
    "RouterBackend",
    "RouterBackendFactory",
    "as_router",
]
