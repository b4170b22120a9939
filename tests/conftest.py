from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from libs.auth.dependencies import get_current_user, require_admin
from libs.auth.models import AuthUser
from libs.db.base import Base
from libs.db.session import get_async_db
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Import all models so metadata includes every table
from services.catalog_service import models as _catalog_models  # noqa: F401
from services.clients_service import models as _clients_models  # noqa: F401
from services.finance_service import models as _finance_models  # noqa: F401
from services.orders_service import models as _orders_models  # noqa: F401

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """
    Fresh in-memory database per test. StaticPool keeps every session on
    one connection so they all see the same database.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    session = session_factory()

    try:
        yield session
    finally:
        await session.close()


@pytest.fixture
def admin_user() -> AuthUser:
    return AuthUser(user_id="admin-auth-id", email="coach@fitcoach.dz", role="admin")


async def _client_for(app, db_session, user=None) -> AsyncGenerator[AsyncClient, None]:
    """
    Yield an AsyncClient for a service app with the DB dependency overridden.
    When a user is given, auth is overridden too.
    """

    async def _get_db():
        yield db_session

    app.dependency_overrides[get_async_db] = _get_db
    if user is not None:
        app.dependency_overrides[get_current_user] = lambda: user
        app.dependency_overrides[require_admin] = lambda: user

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def catalog_client(db_session, admin_user):
    from services.catalog_service.app.main import app

    async for ac in _client_for(app, db_session, admin_user):
        yield ac


@pytest_asyncio.fixture
async def orders_client(db_session, admin_user):
    from services.orders_service.app.main import app

    async for ac in _client_for(app, db_session, admin_user):
        yield ac


@pytest_asyncio.fixture
async def clients_client(db_session, admin_user):
    from services.clients_service.app.main import app

    async for ac in _client_for(app, db_session, admin_user):
        yield ac


@pytest_asyncio.fixture
async def finance_client(db_session, admin_user):
    from services.finance_service.app.main import app

    async for ac in _client_for(app, db_session, admin_user):
        yield ac


@pytest_asyncio.fixture
async def gateway_client(db_session, admin_user):
    from services.gateway_service.app.main import app

    async for ac in _client_for(app, db_session, admin_user):
        yield ac


@pytest_asyncio.fixture
async def anonymous_client(db_session):
    """Gateway client without auth overrides, so admin routes are enforced."""
    from services.gateway_service.app.main import app

    async for ac in _client_for(app, db_session):
        yield ac
