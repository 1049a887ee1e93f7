from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_dispatcher
from app.core.config import get_settings
from app.core.registry import RequestRegistry
from app.core.schema import BaseRequest
from app.models.schemas.requests.user import build_user_registry
from app.models.types.operation import Operation

# Test user constants
TEST_USER_NAME = "Ann"
TEST_USER_EMAIL = "ann@x.com"
TEST_USER_ID = "42"


class RecordingDispatcher:
    """Dispatcher that keeps every request it receives."""

    def __init__(self):
        self.dispatched: list[tuple[Operation, BaseRequest]] = []

    def dispatch(self, operation: Operation, request: BaseRequest) -> None:
        self.dispatched.append((operation, request))


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make sure env changes made by a test do not leak through the cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry() -> RequestRegistry:
    return build_user_registry()


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def create_data() -> dict:
    return {"name": TEST_USER_NAME, "email": TEST_USER_EMAIL}


@pytest.fixture(scope="function")
def test_app(dispatcher: RecordingDispatcher) -> FastAPI:
    """Return the FastAPI app with the dispatcher swapped for a recorder"""
    from app.main import app

    app.dependency_overrides[get_dispatcher] = lambda: dispatcher
    yield app
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
async def client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test"
    ) as client:
        yield client
