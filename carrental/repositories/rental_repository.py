"""대여 레포지토리: 대여 애그리거트 저장소.

Rental Repository: Loads and stores Rental aggregates.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.domain.enums import FuelLevel, RentalStatus
from carrental.domain.rental import Rental, RentalReturn
from carrental.models.booking import RentalRecord
from carrental.repositories.base import BaseRepository


def to_domain(row: RentalRecord) -> Rental:
    """레코드를 대여 애그리거트로 변환합니다 (Row → aggregate)."""
    returned: RentalReturn | None = None
    if row.returned_at is not None:
        returned = RentalReturn(
            km_in=row.km_in,
            fuel_in=FuelLevel(row.fuel_in),
            returned_at=row.returned_at,
        )
    return Rental(
        id=row.id,
        reservation_id=row.reservation_id,
        customer_id=row.customer_id,
        car_id=row.car_id,
        km_out=row.km_out,
        fuel_out=FuelLevel(row.fuel_out),
        picked_up_at=row.picked_up_at,
        returned=returned,
    )


def _apply(row: RentalRecord, rental: Rental) -> None:
    row.reservation_id = rental.reservation_id
    row.customer_id = rental.customer_id
    row.car_id = rental.car_id
    row.km_out = rental.km_out
    row.fuel_out = int(rental.fuel_out)
    row.picked_up_at = rental.picked_up_at
    row.km_in = rental.km_in
    row.fuel_in = int(rental.fuel_in) if rental.fuel_in is not None else None
    row.returned_at = rental.returned_at


class RentalRepository(BaseRepository[RentalRecord]):
    """대여 테이블 레포지토리 (Repository for the rentals table)."""

    def __init__(self) -> None:
        super().__init__(RentalRecord)

    async def find_by_id(self, db: AsyncSession, rental_id: UUID) -> Rental | None:
        row: RentalRecord | None = await self.get_by_id(db, rental_id)
        return to_domain(row) if row is not None else None

    async def find_by_reservation_id(self, db: AsyncSession, reservation_id: UUID) -> Rental | None:
        """예약 ID로 대여를 조회합니다: 예약당 최대 1건.

        Load the rental created from a reservation, if any.
        """
        query: Select = select(RentalRecord).where(RentalRecord.reservation_id == reservation_id)
        row = (await db.execute(query)).scalar_one_or_none()
        return to_domain(row) if row is not None else None

    async def add(self, db: AsyncSession, rental: Rental) -> None:
        row = RentalRecord(id=rental.id)
        _apply(row, rental)
        db.add(row)
        await db.flush()

    async def save(self, db: AsyncSession, rental: Rental) -> None:
        """변경된 대여를 기록합니다.

        Raises:
            LookupError: 저장된 대여가 없는 경우 (Row does not exist)
        """
        row: RentalRecord | None = await self.get_by_id(db, rental.id)
        if row is None:
            raise LookupError(f"rental {rental.id} is not persisted")
        _apply(row, rental)
        await db.flush()

    def build_list_query(
        self,
        customer_id: UUID | None = None,
        car_id: UUID | None = None,
        status: RentalStatus | None = None,
    ) -> Select:
        """대여 목록 쿼리: 최신 픽업순 (Newest pickup first)."""
        query: Select = select(RentalRecord)
        if customer_id is not None:
            query = query.where(RentalRecord.customer_id == customer_id)
        if car_id is not None:
            query = query.where(RentalRecord.car_id == car_id)
        if status is RentalStatus.ACTIVE:
            query = query.where(RentalRecord.returned_at.is_(None))
        elif status is RentalStatus.COMPLETED:
            query = query.where(RentalRecord.returned_at.is_not(None))
        return query.order_by(RentalRecord.picked_up_at.desc())


# 싱글턴 인스턴스: Singleton instance
rental_repository: RentalRepository = RentalRepository()
