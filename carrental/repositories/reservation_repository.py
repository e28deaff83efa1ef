"""예약 레포지토리: 예약 애그리거트 저장소.

Reservation Repository: Loads and stores Reservation aggregates.
Rows are mapped to the domain object on read and written back from it
on save; callers never see a ReservationRecord.
"""

from datetime import datetime
from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.domain.enums import CarCategory, ReservationStatus
from carrental.domain.period import RentalPeriod
from carrental.domain.reservation import (
    Cancelled,
    Confirmed,
    Draft,
    Expired,
    Reservation,
    ReservationState,
)
from carrental.models.booking import ReservationRecord
from carrental.repositories.base import BaseRepository


def _state_from_row(row: ReservationRecord) -> ReservationState:
    status = ReservationStatus(row.status)
    if status is ReservationStatus.CONFIRMED:
        return Confirmed(confirmed_at=row.confirmed_at, rental_id=row.rental_id)
    if status is ReservationStatus.CANCELLED:
        return Cancelled(cancelled_at=row.cancelled_at, confirmed_at=row.confirmed_at)
    if status is ReservationStatus.EXPIRED:
        return Expired(expired_at=row.expired_at)
    return Draft()


def to_domain(row: ReservationRecord) -> Reservation:
    """레코드를 예약 애그리거트로 변환합니다 (Row → aggregate)."""
    return Reservation(
        id=row.id,
        customer_id=row.customer_id,
        car_category=CarCategory(row.car_category),
        period=RentalPeriod(start=row.start_at, end=row.end_at),
        created_at=row.created_at,
        state=_state_from_row(row),
    )


def _apply(row: ReservationRecord, reservation: Reservation) -> None:
    row.customer_id = reservation.customer_id
    row.car_category = reservation.car_category.value
    row.start_at = reservation.period.start
    row.end_at = reservation.period.end
    row.status = reservation.status.value
    row.created_at = reservation.created_at
    row.confirmed_at = reservation.confirmed_at
    row.cancelled_at = reservation.cancelled_at
    row.expired_at = reservation.expired_at
    row.rental_id = reservation.rental_id


class ReservationRepository(BaseRepository[ReservationRecord]):
    """예약 테이블 레포지토리.

    Repository for the reservations table, speaking in domain aggregates.
    """

    def __init__(self) -> None:
        super().__init__(ReservationRecord)

    async def find_by_id(self, db: AsyncSession, reservation_id: UUID) -> Reservation | None:
        """ID로 예약을 조회합니다 (Load an aggregate by id)."""
        row: ReservationRecord | None = await self.get_by_id(db, reservation_id)
        return to_domain(row) if row is not None else None

    async def find_confirmed_by_id(self, db: AsyncSession, reservation_id: UUID) -> Reservation | None:
        """확정 상태인 예약만 조회합니다.

        Load a reservation only when it is Confirmed; any other status
        (or a missing row) yields None.
        """
        query: Select = select(ReservationRecord).where(
            ReservationRecord.id == reservation_id,
            ReservationRecord.status == ReservationStatus.CONFIRMED.value,
        )
        row = (await db.execute(query)).scalar_one_or_none()
        return to_domain(row) if row is not None else None

    async def add(self, db: AsyncSession, reservation: Reservation) -> None:
        """새 예약을 추가합니다 (Insert a new aggregate)."""
        row = ReservationRecord(id=reservation.id)
        _apply(row, reservation)
        db.add(row)
        await db.flush()

    async def save(self, db: AsyncSession, reservation: Reservation) -> None:
        """변경된 예약 상태를 기록합니다 (Write an aggregate back).

        Raises:
            LookupError: 저장된 예약이 없는 경우 (Row does not exist)
        """
        row: ReservationRecord | None = await self.get_by_id(db, reservation.id)
        if row is None:
            raise LookupError(f"reservation {reservation.id} is not persisted")
        _apply(row, reservation)
        await db.flush()

    async def count_confirmed_overlapping(
        self,
        db: AsyncSession,
        category: CarCategory,
        start: datetime,
        end: datetime,
        exclude_reservation_id: UUID | None = None,
    ) -> int:
        """기간이 겹치는 확정 예약 수를 집계합니다.

        Count confirmed reservations of ``category`` whose half-open period
        intersects ``[start, end)``. Touching periods do not count.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            category: 차량 등급 (Car category)
            start: 기간 시작 (Period start)
            end: 기간 종료 (Period end)
            exclude_reservation_id: 제외할 예약 (Reservation to ignore)

        Returns:
            int: 겹치는 확정 예약 수 (Overlapping confirmed count)
        """
        query: Select = (
            select(func.count())
            .select_from(ReservationRecord)
            .where(
                ReservationRecord.car_category == category.value,
                ReservationRecord.status == ReservationStatus.CONFIRMED.value,
                ReservationRecord.start_at < end,
                start < ReservationRecord.end_at,
            )
        )
        if exclude_reservation_id is not None:
            query = query.where(ReservationRecord.id != exclude_reservation_id)
        return (await db.execute(query)).scalar() or 0

    async def select_drafts_to_expire(
        self,
        db: AsyncSession,
        created_before: datetime,
    ) -> list[Reservation]:
        """만료 대상 초안을 조회합니다.

        Select Draft reservations created at or before ``created_before``,
        oldest first.
        """
        query: Select = (
            select(ReservationRecord)
            .where(
                ReservationRecord.status == ReservationStatus.DRAFT.value,
                ReservationRecord.created_at <= created_before,
            )
            .order_by(ReservationRecord.created_at)
        )
        rows: Sequence[ReservationRecord] = (await db.execute(query)).scalars().all()
        return [to_domain(row) for row in rows]

    def build_list_query(
        self,
        customer_id: UUID | None = None,
        status: ReservationStatus | None = None,
        category: CarCategory | None = None,
    ) -> Select:
        """예약 목록 쿼리를 구성합니다 (시작 시각순).

        Build the reservation list query ordered by period start.
        """
        query: Select = select(ReservationRecord)
        if customer_id is not None:
            query = query.where(ReservationRecord.customer_id == customer_id)
        if status is not None:
            query = query.where(ReservationRecord.status == status.value)
        if category is not None:
            query = query.where(ReservationRecord.car_category == category.value)
        return query.order_by(ReservationRecord.start_at, ReservationRecord.created_at)


# 싱글턴 인스턴스: Singleton instance
reservation_repository: ReservationRepository = ReservationRepository()
