import logging

from checkpoint.middleware.pipeline import MiddlewarePipeline
from checkpoint.request_execution.capture import capture_result
from checkpoint.request_execution.models import CheckConfig, Result
from checkpoint.transport.recorder import ResponseRecorder
from checkpoint.transport.request import new_request


class CheckExecutor:
    """
    Runs one check from start to finish:
    • Validates the config and applies defaults
    • Builds the in-memory request
    • Wraps the handler in the middleware pipeline
    • Registers the wrapped handler with the router at the resolved pattern
    • Dispatches the request into a fresh ResponseRecorder
    • Captures the recorded response

    Response status codes are returned as data and never raised.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(f"[{self.__class__.__name__}]")

    async def run(self, config: CheckConfig) -> Result:
        check = config.resolve()

        request = new_request(
            check.method,
            check.path,
            check.body,
            headers=dict(check.headers),
        )

        handler = MiddlewarePipeline(check.middlewares).wrap(check.handler)
        check.router.register(check.pattern, handler)

        recorder = ResponseRecorder()
        self._logger.debug(
            f"-> {check.method} {check.path} (pattern {check.pattern!r}, "
            f"{len(check.middlewares)} middleware, router {check.router!r})"
        )
        await check.router.dispatch(request, recorder)

        result = capture_result(recorder)
        self._logger.debug(f"<- {result.status_code} {check.path} ({len(result.body)} bytes)")
        return result
