"""Integration tests running checks loaded from configuration files"""
import pytest
from aiohttp import web

from checkpoint import Request, ResponseWriter, ServeMux
from checkpoint.config import CheckerRuntimeFactory, ConfigLoader, EnvVarPreprocessor
from tests.fixtures.configs.checks import check_suite_yaml
from tests.fixtures.handlers import echo_body_handler


async def item_handler(request: Request, response: ResponseWriter) -> None:
    item_id = request.path_value("id") or request.match_info.get("id", "")
    response.headers["X-Test-Header"] = request.headers.get("X-Test-Header", "")
    response.headers["X-Middleware-Header"] = request.headers.get("X-Middleware-Header", "")
    response.write_header(200)
    response.write(item_id)


@pytest.mark.integration
@pytest.mark.config
@pytest.mark.asyncio
@pytest.mark.parametrize("router_type", [ServeMux, web.UrlDispatcher], ids=["servemux", "aiohttp"])
async def test_check_from_yaml(tmp_path, check_suite_yaml, router_type):
    """
    GIVEN a YAML check suite on disk
    WHEN a check is built from it and run
    THEN headers, middleware and path parameters from the file should apply
    """
    p = tmp_path / "checks.yaml"
    p.write_text(check_suite_yaml)
    suite = ConfigLoader().from_yaml(p)

    checker = CheckerRuntimeFactory.build(suite.get("get_item"), router_type(), item_handler)
    result = await checker.run()

    assert result.status_code == 200
    assert result.text() == "123"
    assert result.headers["X-Test-Header"] == "TestValue"
    assert result.headers["X-Middleware-Header"] == "MiddlewareValue"


@pytest.mark.integration
@pytest.mark.config
@pytest.mark.asyncio
async def test_body_from_yaml(check_suite_yaml):
    suite = ConfigLoader().from_yaml(check_suite_yaml)

    factory = CheckerRuntimeFactory.build_factory(suite.get("post_body"), echo_body_handler)
    result = await factory(ServeMux()).run()

    assert result.text() == "request body content"


@pytest.mark.integration
@pytest.mark.config
@pytest.mark.asyncio
async def test_env_resolved_token_reaches_handler():
    text = """\
checks:
  - name: bearer
    path: /secure
    middleware:
      - type: bearer
        token: ${API_TOKEN}
"""
    loader = ConfigLoader([EnvVarPreprocessor({"API_TOKEN": "env-token"})])
    suite = loader.from_yaml(text)

    async def auth_handler(request: Request, response: ResponseWriter) -> None:
        response.write(request.headers["Authorization"])

    result = await CheckerRuntimeFactory.build(suite.get("bearer"), ServeMux(), auth_handler).run()

    assert result.text() == "Bearer env-token"
