# Middleware components that observe but do not change the request, plus recovery
import logging
import time
from http import HTTPStatus

from checkpoint.middleware.pipeline import Middleware, MiddlewareFactory, MiddlewareType
from checkpoint.transport.base import HANDLER, ResponseWriter
from checkpoint.transport.recorder import write_error
from checkpoint.transport.request import Request


@MiddlewareFactory.register(MiddlewareType.LOGGING)
class LoggingMiddleware(Middleware):
    """
    Logs the inbound request line and the status the downstream chain produced.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(f"[{self.__class__.__name__}]")

    def __call__(self, next_handler: HANDLER) -> HANDLER:
        async def handler(request: Request, response: ResponseWriter) -> None:
            self._logger.info(f"-> {request.method} {request.raw_path}")
            await next_handler(request, response)
            status = getattr(response, "status_code", None)
            self._logger.info(f"<- {status} {request.raw_path}")

        return handler


@MiddlewareFactory.register(MiddlewareType.TIMING)
class TimingMiddleware(Middleware):
    """
    Measure the elapsed time of the downstream chain and store it in
    request.state["timing"]
    """

    def __call__(self, next_handler: HANDLER) -> HANDLER:
        async def handler(request: Request, response: ResponseWriter) -> None:
            start = time.monotonic()
            try:
                await next_handler(request, response)
            finally:
                duration = time.monotonic() - start
                timing = dict(request.state.get("timing", {}))
                timing["total_seconds"] = duration
                request.state["timing"] = timing

        return handler


@MiddlewareFactory.register(MiddlewareType.RECOVER)
class RecoverMiddleware(Middleware):
    """
    Turn an exception raised downstream into a 500 response. A response whose
    status line was already written cannot be replaced, so the exception is
    re-raised in that case.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(f"[{self.__class__.__name__}]")

    def __call__(self, next_handler: HANDLER) -> HANDLER:
        async def handler(request: Request, response: ResponseWriter) -> None:
            try:
                await next_handler(request, response)
            except Exception as exc:
                self._logger.error(
                    f"Handler raised {type(exc).__name__} in {request.method} {request.raw_path}: {exc}",
                    exc_info=exc,
                )
                if getattr(response, "wrote_header", False):
                    raise
                request.state["recovered_error"] = exc
                write_error(
                    response,
                    HTTPStatus.INTERNAL_SERVER_ERROR.phrase,
                    HTTPStatus.INTERNAL_SERVER_ERROR,
                )

        return handler
