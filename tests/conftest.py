"""테스트 인프라: 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure: In-memory SQLite DB, session, and httpx client fixtures.
Each test gets a fresh schema on a single shared connection (StaticPool),
so the API and the test body see the same data.
"""

from collections.abc import AsyncGenerator
from datetime import datetime, timezone

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from carrental.database import Base, get_db
from carrental.domain.enums import CarCategory, CarStatus
from carrental.main import app
from carrental.models import *  # noqa: F401,F403  (registers every table on Base.metadata)
from carrental.models.customer import Customer
from carrental.models.fleet import Car

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# 서비스 테스트용 고정 시각: Fixed "now" for service tests
NOW = datetime(2029, 12, 1, 9, 0, tzinfo=timezone.utc)


def at(day: int, hour: int, month: int = 1, year: int = 2030) -> datetime:
    """테스트 기간 시각 헬퍼 (UTC datetime shorthand)."""
    return datetime(year, month, day, hour, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진: 테스트마다 스키마를 생성/삭제합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트: DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def make_customer(
    db: AsyncSession,
    email: str = "minji.kim@example.com",
    is_blocked: bool = False,
) -> Customer:
    """테스트 고객을 생성합니다."""
    customer = Customer(first_name="Minji", last_name="Kim", email=email, is_blocked=is_blocked)
    db.add(customer)
    await db.flush()
    await db.refresh(customer)
    return customer


async def make_car(
    db: AsyncSession,
    license_plate: str = "B-CR-1001",
    category: CarCategory = CarCategory.ECONOMY,
    status: CarStatus = CarStatus.AVAILABLE,
) -> Car:
    """테스트 차량을 생성합니다."""
    car = Car(
        manufacturer="Hyundai",
        model="Avante",
        license_plate=license_plate,
        category=category.value,
        status=status.value,
    )
    db.add(car)
    await db.flush()
    await db.refresh(car)
    return car


@pytest_asyncio.fixture
async def customer(db: AsyncSession) -> Customer:
    """기본 테스트 고객."""
    return await make_customer(db)


@pytest_asyncio.fixture
async def economy_car(db: AsyncSession) -> Car:
    """기본 이코노미 차량 1대."""
    return await make_car(db)
