"""테스트 인프라: 임베디드 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure: Embedded in-memory SQLite DB, session, and httpx client fixtures.
Every test gets a fresh in-memory database with the schema created from metadata.
"""

import os

# 앱 임포트 전에 임베디드 DB로 전환: Point the app at an embedded DB before import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["AXIOM_API_TOKEN"] = ""

from collections.abc import AsyncGenerator  # noqa: E402

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker  # noqa: E402

from employee_api.database import Base, create_engine_for, get_db  # noqa: E402
from employee_api.main import app  # noqa: E402
from employee_api.models import Employee  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 새 인메모리 DB와 스키마."""
    eng = create_engine_for(TEST_DATABASE_URL)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def other_db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """같은 엔진의 두 번째 세션: 커밋된 값을 DB에서 다시 읽을 때 사용."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
        await session.rollback()


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


def build_employee() -> Employee:
    """저장되지 않은 테스트 직원을 생성합니다."""
    return Employee(
        first_name="first_name_test",
        last_name="last_name_test",
        email="email_test",
    )


@pytest_asyncio.fixture
async def saved_employee(db: AsyncSession) -> Employee:
    """저장된 테스트 직원."""
    employee = build_employee()
    db.add(employee)
    await db.flush()
    await db.refresh(employee)
    return employee
