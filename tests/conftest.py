# tests/conftest.py
import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from orphanage_care.core.indexes import ensure_indexes
from orphanage_care.main import create_app

@pytest.fixture(scope="session")
def anyio_backend():
    # keep AnyIO on asyncio for the whole test session
    return "asyncio"

@pytest.fixture
async def db():
    # fresh in-memory database per test, with the same unique indexes as production
    database = AsyncMongoMockClient()["orphanagecare_test"]
    await ensure_indexes(database)
    return database

@pytest.fixture
async def test_client():
    # indexes are created by the app lifespan, as in production
    app = create_app(db=AsyncMongoMockClient()["orphanagecare_api_test"])
    async with LifespanManager(app):
        transport = ASGITransport(app=app, raise_app_exceptions=True)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

@pytest.fixture
def profile():
    return {
        "orphanageName": "Sunrise Home",
        "principalName": "Meera Rao",
        "city": "Hyderabad",
        "state": "Telangana",
        "address": "12 Lake View Road",
        "numChildren": 40,
        "needs": "Books, winter clothes",
        "latitude": "17.3850",
        "longitude": "78.4867",
        "portNumber": "5001",
    }
