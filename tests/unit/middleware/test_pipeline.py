"""Unit tests for middleware composition"""

import pytest

from checkpoint import MiddlewarePipeline, ResponseRecorder, compose, new_request
from tests.fixtures.middleware import (
    error_middleware,
    tracking_handler,
    tracking_middleware,
)


@pytest.mark.unit
@pytest.mark.middleware
@pytest.mark.asyncio
class TestComposeOrder:
    """Tests for middleware execution order"""

    async def test_first_declared_runs_first_on_the_way_in(self):
        """
        GIVEN middleware [mw1, mw2, mw3]
        WHEN the composed handler is called
        THEN mw1 should see the request first and the response last
        """
        calls = []
        handler = compose(
            tracking_handler(calls),
            [
                tracking_middleware("mw1", calls),
                tracking_middleware("mw2", calls),
                tracking_middleware("mw3", calls),
            ],
        )

        await handler(new_request("GET", "/test"), ResponseRecorder())

        assert calls == [
            "mw1_before",
            "mw2_before",
            "mw3_before",
            "handler",
            "mw3_after",
            "mw2_after",
            "mw1_after",
        ]

    async def test_empty_list_returns_terminal_handler(self):
        calls = []
        terminal = tracking_handler(calls)

        assert compose(terminal, []) is terminal

    async def test_accepts_any_iterable(self):
        calls = []
        handler = compose(
            tracking_handler(calls),
            (mw for mw in [tracking_middleware("a", calls), tracking_middleware("b", calls)]),
        )

        await handler(new_request("GET", "/test"), ResponseRecorder())

        assert calls[:2] == ["a_before", "b_before"]


@pytest.mark.unit
@pytest.mark.middleware
@pytest.mark.asyncio
class TestMiddlewarePipeline:

    async def test_add_and_extend_keep_declared_order(self):
        calls = []
        pipeline = MiddlewarePipeline()
        pipeline.add(tracking_middleware("first", calls))
        pipeline.extend([tracking_middleware("second", calls), tracking_middleware("third", calls)])

        await pipeline.wrap(tracking_handler(calls))(new_request("GET", "/test"), ResponseRecorder())

        assert len(pipeline) == 3
        assert calls[:3] == ["first_before", "second_before", "third_before"]

    async def test_wrap_can_be_called_repeatedly(self):
        """
        GIVEN a pipeline
        WHEN wrap is called twice
        THEN each composed handler should run the full chain independently
        """
        calls = []
        pipeline = MiddlewarePipeline([tracking_middleware("mw", calls)])

        first = pipeline.wrap(tracking_handler(calls))
        second = pipeline.wrap(tracking_handler(calls))
        await first(new_request("GET", "/a"), ResponseRecorder())
        await second(new_request("GET", "/b"), ResponseRecorder())

        assert calls == ["mw_before", "handler", "mw_after"] * 2


@pytest.mark.unit
@pytest.mark.middleware
@pytest.mark.asyncio
class TestShortCircuit:

    async def test_middleware_can_answer_without_calling_next(self):
        """
        GIVEN middleware that writes a response and does not call next
        WHEN the composed handler is called
        THEN downstream middleware and the handler should not run
        """
        calls = []
        handler = compose(
            tracking_handler(calls),
            [error_middleware, tracking_middleware("never_called", calls)],
        )
        recorder = ResponseRecorder()

        await handler(new_request("GET", "/test"), recorder)

        assert calls == []
        assert recorder.status_code == 500
        assert recorder.body.getvalue() == b"Middleware error\n"
