from checkpoint.core.abstract_factory import TypeAbstractFactory, TypeKeyedFactory
from checkpoint.core.exceptions import (
    CaptureError,
    CheckpointError,
    ConfigurationError,
    RequestConstructionError,
    UnsupportedRouterError,
)
from checkpoint.core.logging import configure_logging, set_aiohttp_logging_level

__all__ = [
    "TypeAbstractFactory",
    "TypeKeyedFactory",
    "CaptureError",
    "CheckpointError",
    "ConfigurationError",
    "RequestConstructionError",
    "UnsupportedRouterError",
    "configure_logging",
    "set_aiohttp_logging_level",
]
