import pytest
import pytest_asyncio
from unittest.mock import AsyncMock
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from account_service.adapter.services.revocation_registry import InMemoryRevocationRegistry
from account_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from account_service.app.services.notification_service import NotificationService
from account_service.depends import (
    get_notification_service,
    get_revocation_registry,
    get_unit_of_work,
)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    async with Session() as session:
        yield session


@pytest.fixture
def revocation_registry():
    return InMemoryRevocationRegistry()


@pytest.fixture
def notifications():
    return AsyncMock(spec=NotificationService)


@pytest_asyncio.fixture
async def client(db_session, revocation_registry, notifications):
    from account_service.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_revocation_registry] = lambda: revocation_registry
    app.dependency_overrides[get_notification_service] = lambda: notifications

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


ALICE = {"name": "alice01", "email": "a@x.com", "password": "longenough1"}


@pytest_asyncio.fixture
async def registered(client):
    """Registers alice01 and returns the registration response body"""
    response = await client.post("/users/register", json=ALICE)
    assert response.status_code == 201
    return response.json()
