"""
Campus Records API - Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session:   AsyncMock session for service unit tests
    ├── db_engine:         in-memory SQLite engine with every table created
    ├── session_factory:   async_sessionmaker bound to db_engine
    ├── seed:              helper that inserts ORM objects and returns them
    ├── test_app:          FastAPI app whose get_db_session uses db_engine
    ├── test_client:       HTTPX AsyncClient talking to test_app
    └── user_headers / admin_headers: bearer tokens for each role
"""

import os

# Must run before any app import: settings are read at import time.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET"] = "test-secret-not-real-0123456789abcdef"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator, Dict  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import jwt  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from app import models  # noqa: E402,F401
from app.config import settings  # noqa: E402
from app.database import Base, get_db_session  # noqa: E402
from app.main import create_app  # noqa: E402


def _encode_token(*roles: str, subject: str = "someone@ucsb.edu", secret: str = None) -> str:
    """Mint a bearer token the way the hosting login flow would."""
    return jwt.encode(
        {"sub": subject, "roles": list(roles)},
        secret or settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )


# ══════════════════════════════════════════════════════════════════════════
# Unit-test fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
        result = await service.get(mock_db_session, 7)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Database fixtures (in-memory SQLite)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    # StaticPool: every session shares the single in-memory connection.
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def seed(session_factory):
    """
    Insert ORM objects directly and return them with generated keys.

    Usage:
        [item] = await seed(UCSBDiningCommonsMenuItem(name="Tofu"))
    """
    async def _seed(*rows):
        async with session_factory() as session:
            session.add_all(rows)
            await session.commit()
        return list(rows)

    return _seed


# ══════════════════════════════════════════════════════════════════════════
# HTTP fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def test_app(session_factory):
    app = create_app()

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    return app


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client (no auth header by default).

    Usage:
        async def test_list(test_client, user_headers):
            response = await test_client.get("/api/articles/all", headers=user_headers)
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def user_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {_encode_token('ROLE_USER')}"}


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {_encode_token('ROLE_ADMIN', 'ROLE_USER')}"}


@pytest.fixture
def make_token():
    """
    Token factory for tests that need a specific claim set.

    Usage:
        token = make_token("ROLE_USER", subject="cgaucho@ucsb.edu")
        token = make_token("ROLE_ADMIN", secret="wrong-secret")
    """
    return _encode_token
