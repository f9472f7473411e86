from checkpoint.config.models.check import CheckConfigModel, CheckSuiteConfig
from checkpoint.config.models.middleware import (
    BasicAuthMiddlewareModel,
    BearerTokenMiddlewareModel,
    HeaderMiddlewareModel,
    MiddlewareConfigModel,
    MiddlewareConfigUnion,
    SimpleMiddlewareModel,
)

__all__ = [
    "CheckConfigModel",
    "CheckSuiteConfig",
    "BasicAuthMiddlewareModel",
    "BearerTokenMiddlewareModel",
    "HeaderMiddlewareModel",
    "MiddlewareConfigModel",
    "MiddlewareConfigUnion",
    "SimpleMiddlewareModel",
]
