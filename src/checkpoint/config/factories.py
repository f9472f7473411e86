from abc import ABC, abstractmethod
from typing import Any, Callable

from checkpoint.checker import Checker
from checkpoint.config.models.check import CheckConfigModel
from checkpoint.config.models.middleware import MiddlewareConfigModel
from checkpoint.middleware.pipeline import MIDDLEWARE_FUNC, MiddlewareFactory, MiddlewareType
from checkpoint.transport.base import HANDLER


class RuntimeFactory(ABC):

    @staticmethod
    @abstractmethod
    def build_factory(cfg: Any, *args, **kwargs) -> Callable[[], Any]: ...


class MiddlewareRuntimeFactory(RuntimeFactory):

    @staticmethod
    def build_factory(cfg: MiddlewareConfigModel) -> Callable[[], MIDDLEWARE_FUNC]:

        def factory() -> MIDDLEWARE_FUNC:
            return MiddlewareFactory.create(MiddlewareType(cfg.type), **cfg.to_runtime_args())

        return factory

    @staticmethod
    def build_all(mw_cfgs: list[MiddlewareConfigModel]) -> list[MIDDLEWARE_FUNC]:

        return [MiddlewareRuntimeFactory.build_factory(cfg)() for cfg in mw_cfgs]


class CheckerRuntimeFactory(RuntimeFactory):
    """
    Turns a CheckConfigModel into a Checker. Handlers are code, so the caller
    supplies the handler and the router; everything else comes from the model.
    """

    @staticmethod
    def build(cfg: CheckConfigModel, router: Any, handler: HANDLER) -> Checker:
        checker = Checker(router=router, handler=handler, path=cfg.path)
        checker.with_headers(cfg.headers)
        checker.with_middlewares(*MiddlewareRuntimeFactory.build_all(cfg.middleware))

        if cfg.pattern is not None:
            checker.with_pattern(cfg.pattern)
        if cfg.method is not None:
            checker.with_method(cfg.method)
        if cfg.body is not None:
            checker.with_body(cfg.body)

        return checker

    @staticmethod
    def build_factory(cfg: CheckConfigModel, handler: HANDLER) -> Callable[[Any], Checker]:

        def factory(router: Any) -> Checker:
            return CheckerRuntimeFactory.build(cfg, router, handler)

        return factory
