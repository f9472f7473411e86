from typing import Any

from checkpoint.request_execution.executor import CheckExecutor
from checkpoint.request_execution.models import CheckConfig, Result
from checkpoint.transport.base import HANDLER


class Checker(CheckConfig):
    """
    Reusable check bound to a router. Configure it with the with_* mutators
    and await run() to execute it:

        result = await (
            Checker(ServeMux(), handler)
            .with_path("/test/123")
            .with_pattern("/test/{id}")
            .run()
        )

    Every run registers the handler with the router again; whether a second
    registration of the same pattern replaces or conflicts with the first is
    up to the router.
    """

    async def run(self) -> Result:
        return await CheckExecutor().run(self)


def new_checker(router: Any, handler: HANDLER | None = None, path: str = "") -> Checker:
    return Checker(router=router, handler=handler, path=path)
