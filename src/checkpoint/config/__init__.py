from checkpoint.config.factories import (
    CheckerRuntimeFactory,
    MiddlewareRuntimeFactory,
    RuntimeFactory,
)
from checkpoint.config.loader import ConfigLoader
from checkpoint.config.preprocessor import (
    ConfigPreprocessor,
    ConfigValue,
    EnvVarPreprocessor,
)
from checkpoint.config.models import (
    BasicAuthMiddlewareModel,
    BearerTokenMiddlewareModel,
    CheckConfigModel,
    CheckSuiteConfig,
    HeaderMiddlewareModel,
    MiddlewareConfigModel,
    SimpleMiddlewareModel,
)

__all__ = [
    "CheckerRuntimeFactory",
    "MiddlewareRuntimeFactory",
    "RuntimeFactory",
    "ConfigLoader",
    "ConfigPreprocessor",
    "ConfigValue",
    "EnvVarPreprocessor",
    "BasicAuthMiddlewareModel",
    "BearerTokenMiddlewareModel",
    "CheckConfigModel",
    "CheckSuiteConfig",
    "HeaderMiddlewareModel",
    "MiddlewareConfigModel",
    "SimpleMiddlewareModel",
]
