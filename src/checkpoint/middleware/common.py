# Standard middleware - these middleware objects mutate the request
import base64

from checkpoint.middleware.pipeline import Middleware, MiddlewareFactory, MiddlewareType
from checkpoint.transport.base import HANDLER, ResponseWriter
from checkpoint.transport.request import Request


@MiddlewareFactory.register(MiddlewareType.HEADER)
class HeaderMiddleware(Middleware):
    """
    Set a request header before delegating. Any existing value is replaced.
    """

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value

    def __call__(self, next_handler: HANDLER) -> HANDLER:
        async def handler(request: Request, response: ResponseWriter) -> None:
            request.headers[self.key] = self.value
            await next_handler(request, response)

        return handler


@MiddlewareFactory.register(MiddlewareType.BASIC_AUTH)
class BasicAuthMiddleware(Middleware):

    def __init__(self, username: str, password: str) -> None:
        self.username = username
        self.password = password

    def __call__(self, next_handler: HANDLER) -> HANDLER:
        raw_credentials = f"{self.username}:{self.password}"
        b64_credentials = base64.b64encode(raw_credentials.encode("utf-8")).decode("utf-8")

        async def handler(request: Request, response: ResponseWriter) -> None:
            request.headers["Authorization"] = f"Basic {b64_credentials}"
            await next_handler(request, response)

        return handler


@MiddlewareFactory.register(MiddlewareType.BEARER)
class BearerTokenMiddleware(Middleware):
    """
    Inject a static bearer token into the Authorization header.
    """

    def __init__(self, token: str) -> None:
        self.token = token

    def __call__(self, next_handler: HANDLER) -> HANDLER:
        async def handler(request: Request, response: ResponseWriter) -> None:
            request.headers["Authorization"] = f"Bearer {self.token}"
            await next_handler(request, response)

        return handler
