"""Integration fixtures — a fresh SQLite schema and an HTTP client per test."""

import jwt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import get_settings
from app.infrastructure.database import Base, engine
from app.main import app


def _bearer(email: str, role: str) -> dict[str, str]:
    settings = get_settings()
    token = jwt.encode(
        {"sub": email, "role": role}, settings.jwt_secret_key, algorithm=settings.jwt_algorithm
    )
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def schema():
    # ASGITransport does not run the lifespan, so the schema is managed here.
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(schema):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return _bearer("admin@example.com", "Admin")


@pytest.fixture
def fan_headers() -> dict[str, str]:
    return _bearer("fan@example.com", "User")


@pytest.fixture
def bearer():
    """Builds Authorization headers for an arbitrary email and role."""
    return _bearer
