from checkpoint import Request, ResponseWriter
from checkpoint.transport.base import HANDLER


def tracking_middleware(name: str, calls: list[str]):
    """Middleware that records `<name>_before` / `<name>_after` around the next handler."""

    def middleware(next_handler: HANDLER) -> HANDLER:
        async def handler(request: Request, response: ResponseWriter) -> None:
            calls.append(f"{name}_before")
            await next_handler(request, response)
            calls.append(f"{name}_after")

        return handler

    return middleware


def tracking_handler(calls: list[str]) -> HANDLER:
    async def handler(request: Request, response: ResponseWriter) -> None:
        calls.append("handler")
        response.write_header(200)

    return handler


def set_request_header(key: str, value: str):
    def middleware(next_handler: HANDLER) -> HANDLER:
        async def handler(request: Request, response: ResponseWriter) -> None:
            request.headers[key] = value
            await next_handler(request, response)

        return handler

    return middleware


def set_header_if_present(required: str, key: str, value: str):
    """Set request header `key` only when `required` is already on the request."""

    def middleware(next_handler: HANDLER) -> HANDLER:
        async def handler(request: Request, response: ResponseWriter) -> None:
            if required in request.headers:
                request.headers[key] = value
            await next_handler(request, response)

        return handler

    return middleware


def error_middleware(next_handler: HANDLER) -> HANDLER:
    """Answers 500 without calling the next handler."""

    async def handler(request: Request, response: ResponseWriter) -> None:
        response.headers["Content-Type"] = "text/plain; charset=utf-8"
        response.write_header(500)
        response.write("Middleware error\n")

    return handler
