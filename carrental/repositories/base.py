"""공용 레포지토리 베이스.

Shared repository base: primary-key lookup, paginated listing and
insertion for one ORM model. Nothing here commits; the router owns the
transaction.
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """모델 하나에 대한 공용 쿼리 (Common queries for one model).

    Usage:
        class CarRepository(BaseRepository[Car]):
            def __init__(self) -> None:
                super().__init__(Car)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_by_id(self, db: AsyncSession, record_id: UUID) -> ModelType | None:
        # 세션 identity map을 먼저 확인: Session identity map is checked first
        return await db.get(self.model, record_id)

    async def get_paginated(
        self,
        db: AsyncSession,
        query: Select,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[Sequence[ModelType], int]:
        """목록 쿼리에 페이지를 적용합니다.

        Run ``query`` for one page and count the unpaged result.

        Returns:
            tuple[Sequence[ModelType], int]: (페이지 항목, 전체 개수)
                (Items of the page, total number of matches)
        """
        count_query: Select = select(func.count()).select_from(query.order_by(None).subquery())
        total: int = (await db.execute(count_query)).scalar_one()

        paged: Select = query.limit(per_page).offset((page - 1) * per_page)
        items: Sequence[ModelType] = (await db.execute(paged)).scalars().all()
        return items, total

    async def insert(self, db: AsyncSession, **values: Any) -> ModelType:
        """행을 추가하고 DB 기본값을 읽어옵니다.

        Add a row, flush, and refresh so server/column defaults are loaded.
        """
        row: ModelType = self.model(**values)
        db.add(row)
        await db.flush()
        await db.refresh(row)
        return row
