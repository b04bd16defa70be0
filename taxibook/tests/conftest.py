"""
Centralized Test Configuration.
"""

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from taxibook.app.main import app
from taxibook.app.core.config import settings
from taxibook.app.db.session import get_db, Base

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


@pytest.fixture(scope="session", autouse=True)
def apply_overrides():
    """Point the app at the in-memory database and use the cheapest bcrypt cost."""
    async def override_get_db():
        async with TestingSessionLocal() as session:
            yield session

    original_rounds = settings.bcrypt_rounds
    settings.bcrypt_rounds = 4
    app.dependency_overrides[get_db] = override_get_db
    yield

    app.dependency_overrides = {}
    settings.bcrypt_rounds = original_rounds


@pytest.fixture(autouse=True)
async def setup_database():
    """Create tables before each test function and drop after."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client():
    """Async client for testing."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# Shared session for fixture data creation and row inspection
@pytest.fixture
async def db_session():
    async with TestingSessionLocal() as session:
        yield session


@pytest.fixture
def customer_payload():
    return {
        "customer_type": "cab_service_customer",
        "username": "ravi",
        "phone": "5550001",
        "password": "s3cret",
        "email": "ravi@example.com",
        "account_status": "active",
    }


@pytest.fixture
def trip_payload():
    return {
        "customer_name": "ravi",
        "pickup_location": "A",
        "dropoff_location": "B",
        "trip_date": "2024-01-01",
        "trip_time": "10:00",
        "vehicle_type": "sedan",
        "passengers": 2,
        "contact_number1": "555",
    }
