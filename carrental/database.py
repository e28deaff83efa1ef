"""비동기 DB 엔진, 세션, ORM 베이스.

Async engine, session factory and declarative base. One session per
request is the unit of work of a use case: services flush, the router
commits once.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from carrental.config import settings


def _engine_options(url: str) -> dict[str, Any]:
    """드라이버별 엔진 옵션 (Driver-specific engine options)."""
    options: dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if url.startswith("postgresql"):
        # 트랜잭션 모드 풀러(pgbouncer)에서는 prepared statement 캐시 불가
        # Transaction-mode poolers cannot keep prepared statement caches
        options.update(pool_size=5, max_overflow=10, connect_args={"statement_cache_size": 0})
    return options


engine: AsyncEngine = create_async_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))

# 커밋 후에도 로드된 속성 유지: loaded attributes stay readable after commit
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(engine, expire_on_commit=False)


class Base(DeclarativeBase):
    """모든 ORM 모델의 베이스 (Declarative base for every table)."""


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """요청 단위 세션 의존성.

    Yield one session per request. Uncommitted work is rolled back when
    the session closes.
    """
    async with async_session() as session:
        yield session
