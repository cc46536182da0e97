"""Shared pytest fixtures."""

from collections.abc import AsyncIterator, Iterator
from uuid import UUID

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from fakes import FakeCollection, FakeMongoClient

from tasklist.app import App
from tasklist.config import Config
from tasklist.core.core import Core
from tasklist.core.modules.user.models import User
from tasklist.web.server import create_fastapi_app


@pytest.fixture
def config() -> Config:
    """Configuration with a cheap bcrypt work factor."""
    return Config(
        database_url="mongodb://localhost:27017/tasklist_test",
        host="127.0.0.1",
        port=3000,
        debug=True,
        jwt_secret="test-global-secret-0123456789abcdef",
        bcrypt_rounds=4,
    )


@pytest.fixture
def mongo_client() -> FakeMongoClient:
    return FakeMongoClient()


@pytest.fixture
def users_collection(mongo_client: FakeMongoClient) -> FakeCollection:
    return mongo_client.get_database("tasklist_test").get_collection("users")


@pytest_asyncio.fixture
async def core(config: Config, mongo_client: FakeMongoClient) -> AsyncIterator[Core]:
    """Started core backed by the in-memory store."""
    core = Core(config, mongo_client)  # type: ignore[arg-type]
    async with core.lifespan():
        yield core


@pytest_asyncio.fixture
async def user(core: Core) -> User:
    """Persisted user without sessions."""
    return await core.services.user.create_user("Alice@Example.com", "secret1")


@pytest.fixture
def client(config: Config, mongo_client: FakeMongoClient) -> Iterator[TestClient]:
    """HTTP client running the full app lifespan against the in-memory store."""
    app = App(config, mongo_client)  # type: ignore[arg-type]
    with TestClient(create_fastapi_app(app, config)) as test_client:
        yield test_client


@pytest.fixture
def mock_user() -> User:
    """Create a mock user for testing."""
    return User(
        id=UUID("87654321-4321-8765-4321-876543218765"),
        email="testuser@example.com",
        password_hash="$2b$12$hashed_password_here",
        token_salt="0f1e2d3c4b5a69788796a5b4c3d2e1f0",
    )
