"""Test fixtures — a fresh database per test, real auth pipeline.

1. Each test gets its own engine and schema, built from the ORM models
   (in-memory SQLite by default; point BOOKMARKS_TEST_DATABASE_URL at a
   Postgres database to run the same suite there).
2. The app's get_db dependency is overridden to hand out that session.
3. Auth is NOT mocked: tests sign up through the API and send the
   returned bearer token, so the token gate runs on every request.
"""

import os
import uuid

# Must be set before bookmarks.config builds its settings singleton.
os.environ.setdefault("BOOKMARKS_BCRYPT_ROUNDS", "4")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from bookmarks.db.engine import get_db
from bookmarks.db.models import Base, User
from bookmarks.main import app


TEST_DB_URL = os.environ.get(
    "BOOKMARKS_TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:"
)


@pytest_asyncio.fixture()
async def db_session():
    """Per-test session on a freshly created schema, dropped afterwards."""
    engine = create_async_engine(TEST_DB_URL, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session = AsyncSession(engine, expire_on_commit=False)
    try:
        yield session
    finally:
        await session.close()
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()


@pytest_asyncio.fixture()
async def client(db_session):
    """HTTP client with the app's get_db overridden for testing."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def signup(client):
    """Factory: sign up a user through the API, return bearer headers.

    Email defaults to a random address so one test can create several users.
    """
    async def _signup(email: str | None = None, password: str = "password_123"):
        email = email or f"user-{uuid.uuid4().hex[:8]}@example.com"
        r = await client.post(
            "/auth/signup", json={"email": email, "password": password}
        )
        assert r.status_code == 201, r.text
        return {"Authorization": f"Bearer {r.json()['access_token']}"}

    return _signup


@pytest_asyncio.fixture()
async def user(db_session):
    """A user row inserted directly, for service-level tests."""
    u = User(email=f"svc-{uuid.uuid4().hex[:8]}@example.com", password_hash="unused")
    db_session.add(u)
    await db_session.commit()
    return u


@pytest_asyncio.fixture()
async def other_user(db_session):
    u = User(email=f"other-{uuid.uuid4().hex[:8]}@example.com", password_hash="unused")
    db_session.add(u)
    await db_session.commit()
    return u
