"""
Shared pytest fixtures.

Every test gets its own application instance backed by a fresh SQLite
file in tmp_path, and an HTTPX AsyncClient talking to it in-process.

Fixture chain:
    app → client → photographer_id → folder_id → album_id
"""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from snapshare.config import Settings
from snapshare.main import create_app


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway database file."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        metrics_enabled=False,
    )


@pytest_asyncio.fixture
async def app(settings):
    """
    Application with its tables created.

    ASGITransport does not run the lifespan, so the database is opened and
    closed here.
    """
    application = create_app(settings)
    await application.state.database.init()
    yield application
    await application.state.database.close()


@pytest_asyncio.fixture
async def client(app):
    """
    HTTPX AsyncClient routed straight into the app.

    Usage:
        async def test_list(client):
            response = await client.get("/photographers")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def photographer_payload():
    return {
        "name": "A",
        "email": "a@a.com",
        "password": "p",
        "document": "1",
        "company_name": "C",
        "logo": "l",
        "description": "d",
    }


@pytest_asyncio.fixture
async def photographer_id(client, photographer_payload):
    response = await client.post("/photographers", json=photographer_payload)
    assert response.status_code == 201
    return response.json()["id"]


@pytest_asyncio.fixture
async def folder_id(client, photographer_id):
    response = await client.post(
        "/folders", json={"name": "Summer", "photographer_id": photographer_id}
    )
    assert response.status_code == 201
    return response.json()["id"]


@pytest_asyncio.fixture
async def album_id(client, folder_id):
    response = await client.post(
        "/albums",
        json={"download_count": 0, "download_limit": 10, "folder_id": folder_id, "name": "X"},
    )
    assert response.status_code == 201
    return response.json()["id"]
