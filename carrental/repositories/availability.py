"""세션 바인딩 용량/중복 조회 어댑터.

Session-bound adapters exposing the two conflict policy inputs over the
car and reservation repositories.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from carrental.domain.enums import CarCategory
from carrental.repositories.car_repository import car_repository
from carrental.repositories.reservation_repository import reservation_repository


class FleetCapacity:
    """등급별 용량 조회 (CarCapacitySource over the cars table)."""

    def __init__(self, db: AsyncSession) -> None:
        self._db: AsyncSession = db

    async def count_cars_in_category(self, category: CarCategory) -> int:
        return await car_repository.count_in_category(self._db, category)


class ConfirmedReservationOverlaps:
    """겹치는 확정 예약 조회 (ConfirmedOverlapSource over the reservations table)."""

    def __init__(self, db: AsyncSession) -> None:
        self._db: AsyncSession = db

    async def count_confirmed_overlapping(
        self,
        category: CarCategory,
        start: datetime,
        end: datetime,
        exclude_reservation_id: UUID | None,
    ) -> int:
        return await reservation_repository.count_confirmed_overlapping(
            self._db, category, start, end, exclude_reservation_id
        )
