"""차량 레포지토리: 차량 조회 및 등급별 용량 집계.

Car Repository: Car queries and per-category capacity counting.
"""

from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.domain.enums import CAPACITY_STATUSES, CarCategory, CarStatus
from carrental.models.fleet import Car
from carrental.repositories.base import BaseRepository


class CarRepository(BaseRepository[Car]):
    """차량 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the cars table.
    """

    def __init__(self) -> None:
        super().__init__(Car)

    def build_list_query(
        self,
        category: CarCategory | None = None,
        status: CarStatus | None = None,
    ) -> Select:
        """차량 목록 쿼리를 구성합니다 (등록순 정렬).

        Build the car list query, optionally filtered by category/status.
        """
        query: Select = select(Car)
        if category is not None:
            query = query.where(Car.category == category.value)
        if status is not None:
            query = query.where(Car.status == status.value)
        return query.order_by(Car.created_at, Car.license_plate)

    async def count_in_category(
        self,
        db: AsyncSession,
        category: CarCategory,
    ) -> int:
        """등급 내 용량 차량 수를 집계합니다.

        Count the cars of a category that make up its capacity: available
        and rented cars. Cars in maintenance or retired do not count.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            category: 차량 등급 (Car category)

        Returns:
            int: 용량 차량 수 (Capacity count)
        """
        query: Select = (
            select(func.count())
            .select_from(Car)
            .where(
                Car.category == category.value,
                Car.status.in_([s.value for s in CAPACITY_STATUSES]),
            )
        )
        return (await db.execute(query)).scalar() or 0

    async def license_plate_exists(
        self,
        db: AsyncSession,
        license_plate: str,
        exclude_id: UUID | None = None,
    ) -> bool:
        """번호판 중복 여부를 확인합니다 (Check license plate uniqueness)."""
        query: Select = select(func.count()).select_from(Car).where(Car.license_plate == license_plate)
        if exclude_id is not None:
            query = query.where(Car.id != exclude_id)
        count: int = (await db.execute(query)).scalar() or 0
        return count > 0


# 싱글턴 인스턴스: Singleton instance
car_repository: CarRepository = CarRepository()
