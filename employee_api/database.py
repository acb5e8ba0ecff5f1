"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine, session factory, and ORM base class.
PostgreSQL (asyncpg) is the production target; SQLite (aiosqlite) is
supported for embedded and test databases.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from employee_api.config import settings


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    """

    pass


def create_engine_for(database_url: str, echo: bool = False) -> AsyncEngine:
    """URL에 맞는 비동기 엔진을 생성합니다.

    Create an async engine configured for the given database URL.
    SQLite URLs share a single connection (StaticPool) so that in-memory
    databases survive across sessions.

    Args:
        database_url: SQLAlchemy 비동기 연결 URL (Async connection URL)
        echo: SQL 로그 출력 여부 (Whether to echo SQL statements)

    Returns:
        AsyncEngine: 생성된 엔진 (Configured async engine)
    """
    if database_url.startswith("sqlite"):
        return create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    # pool_pre_ping=True: 커넥션 풀에서 꺼낸 연결의 유효성을 사전 확인 (Validates connections before use)
    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
    )


# 비동기 데이터베이스 엔진: Async database engine
engine: AsyncEngine = create_engine_for(settings.DATABASE_URL, echo=settings.DEBUG)

# 비동기 세션 팩토리: Async session factory
# expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit without refresh)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """비동기 데이터베이스 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an async database session.
    The session is closed after the request completes.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


async def create_all_tables(engine_instance: AsyncEngine | None = None) -> None:
    """ORM 메타데이터로부터 모든 테이블을 생성합니다.

    Create all tables registered on Base.metadata.
    """
    import employee_api.models  # noqa: F401: register all models with metadata

    async with (engine_instance or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all_tables(engine_instance: AsyncEngine | None = None) -> None:
    """Drop all tables registered on Base.metadata."""
    import employee_api.models  # noqa: F401

    async with (engine_instance or engine).begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
