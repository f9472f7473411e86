import json

from checkpoint import Request, ResponseWriter


async def ok_handler(request: Request, response: ResponseWriter) -> None:
    response.headers["Content-Type"] = "application/json"
    response.write_header(200)
    response.write(b'{"message": "success"}')


async def echo_body_handler(request: Request, response: ResponseWriter) -> None:
    response.headers["Content-Type"] = "application/json"
    response.write_header(200)
    response.write(await request.read())


def echo_header_handler(name: str):
    """Copy request header `name` into the response header of the same name."""

    async def handler(request: Request, response: ResponseWriter) -> None:
        response.headers["Content-Type"] = "application/json"
        response.headers[name] = request.headers.get(name, "")
        response.write_header(200)
        response.write(b'{"message": "success"}')

    return handler


async def internal_error_handler(request: Request, response: ResponseWriter) -> None:
    response.write_header(500)


async def silent_handler(request: Request, response: ResponseWriter) -> None:
    return None


async def describe_request_handler(request: Request, response: ResponseWriter) -> None:
    response.headers["Content-Type"] = "application/json"
    response.write(json.dumps({
        "method": request.method,
        "path": request.path,
        "query": dict(request.query),
        "body": await request.text(),
    }))
