import pytest
from tests.fixtures.routers import (
    mux,
    recording_router,
    url_dispatcher,
)


@pytest.fixture
def dummy_headers():
    return {
        "Content-Type": "application/json",
        "Authorization": "Bearer dummy-token"
    }

__all__ = [
    'mux',
    'recording_router',
    'url_dispatcher',
]
