"""예약 서비스: 예약 유스케이스 오케스트레이션.

Reservation Service: Orchestrates the reservation use cases:
create, change period, confirm, cancel and the draft expiry batch.

Each use case runs inside the request's session: it loads the
aggregate, consults the conflict policy where capacity matters, applies
the domain transition and flushes. The router commits once on success;
a failed Result leaves nothing to commit.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from carrental.config import settings
from carrental.domain.enums import CarCategory, ReservationConflict, ReservationStatus
from carrental.domain.errors import ReservationErrors
from carrental.domain.period import RentalPeriod, as_utc
from carrental.domain.policies import ReservationConflictPolicy, map_conflict
from carrental.domain.reservation import Reservation
from carrental.domain.result import Result, log_if_failure
from carrental.models.types import utc_now
from carrental.repositories.availability import ConfirmedReservationOverlaps, FleetCapacity
from carrental.repositories.reservation_repository import reservation_repository, to_domain
from carrental.schemas.booking import ReservationCreate, ReservationPeriodUpdate, ReservationResponse
from carrental.schemas.common import PaginatedResponse
from carrental.services.customer_service import customer_service

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
PolicyFactory = Callable[[AsyncSession], ReservationConflictPolicy]


def build_conflict_policy(db: AsyncSession) -> ReservationConflictPolicy:
    """세션에 바인딩된 충돌 정책을 생성합니다 (Policy over the request session)."""
    return ReservationConflictPolicy(FleetCapacity(db), ConfirmedReservationOverlaps(db))


class ReservationService:
    """예약 유스케이스 서비스.

    Reservation use-case service.

    Attributes:
        _clock: 현재 UTC 시각 제공자 (Current time provider)
        _policy_factory: 세션별 충돌 정책 생성기 (Builds the conflict policy per session)
        _draft_expiry_minutes: 초안 유효 시간, None이면 설정값 (Draft lifetime override)
    """

    def __init__(
        self,
        clock: Clock = utc_now,
        policy_factory: PolicyFactory = build_conflict_policy,
        draft_expiry_minutes: int | None = None,
    ) -> None:
        self._clock: Clock = clock
        self._policy_factory: PolicyFactory = policy_factory
        self._draft_expiry_minutes: int | None = draft_expiry_minutes

    def to_response(self, reservation: Reservation) -> ReservationResponse:
        """예약 애그리거트를 응답 스키마로 변환합니다.

        Convert a Reservation aggregate to a ReservationResponse schema.
        """
        return ReservationResponse(
            id=str(reservation.id),
            customer_id=str(reservation.customer_id),
            car_category=reservation.car_category,
            start=reservation.period.start,
            end=reservation.period.end,
            status=reservation.status,
            created_at=reservation.created_at,
            confirmed_at=reservation.confirmed_at,
            cancelled_at=reservation.cancelled_at,
            expired_at=reservation.expired_at,
            rental_id=str(reservation.rental_id) if reservation.rental_id else None,
        )

    async def _check_conflict(
        self,
        db: AsyncSession,
        category: CarCategory,
        period: RentalPeriod,
        reservation_id: UUID,
    ) -> Result[None]:
        policy: ReservationConflictPolicy = self._policy_factory(db)
        conflict: ReservationConflict = await policy.check(category, period, exclude_reservation_id=reservation_id)
        if conflict is not ReservationConflict.NONE:
            return Result.fail(map_conflict(conflict))
        return Result.ok()

    async def create(self, db: AsyncSession, data: ReservationCreate) -> Result[Reservation]:
        """초안 예약을 생성합니다.

        Create a Draft reservation for an existing, non-blocked customer.
        The start must lie in the future. No capacity is taken until the
        reservation is confirmed.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 예약 생성 데이터 (Reservation creation data)

        Returns:
            Result[Reservation]: 초안 예약 또는 InvalidCustomer / StartDateInPast /
                InvalidPeriod
        """
        context = "ReservationService.create"
        customer_result = await customer_service.ensure_can_reserve(db, data.customer_id)
        if customer_result.is_failure:
            return log_if_failure(logger, context, Result.fail(customer_result.error), customer_id=data.customer_id)

        now: datetime = self._clock()
        if as_utc(data.start) <= now:
            return log_if_failure(
                logger, context, Result.fail(ReservationErrors.START_DATE_IN_PAST), start=data.start, now=now
            )

        result = Reservation.create(
            customer_id=data.customer_id,
            car_category=data.car_category,
            start=data.start,
            end=data.end,
            created_at=now,
        )
        if result.is_failure:
            return log_if_failure(logger, context, result, start=data.start, end=data.end)

        reservation: Reservation = result.value
        await reservation_repository.add(db, reservation)
        logger.info(
            "Reservation draft created reservation_id=%s customer_id=%s category=%s",
            reservation.id,
            reservation.customer_id,
            reservation.car_category.value,
        )
        return Result.ok(reservation)

    async def get(self, db: AsyncSession, reservation_id: UUID) -> Result[Reservation]:
        reservation: Reservation | None = await reservation_repository.find_by_id(db, reservation_id)
        if reservation is None:
            return Result.fail(ReservationErrors.NOT_FOUND)
        return Result.ok(reservation)

    async def list_reservations(
        self,
        db: AsyncSession,
        customer_id: UUID | None = None,
        status: ReservationStatus | None = None,
        category: CarCategory | None = None,
        page: int = 1,
        per_page: int = 20,
    ) -> PaginatedResponse:
        """예약 목록을 조회합니다 (List reservations, paginated)."""
        query = reservation_repository.build_list_query(customer_id=customer_id, status=status, category=category)
        rows, total = await reservation_repository.get_paginated(db, query, page, per_page)
        return PaginatedResponse(
            items=[self.to_response(to_domain(row)) for row in rows],
            total=total,
            page=page,
            per_page=per_page,
        )

    async def change_period(
        self,
        db: AsyncSession,
        reservation_id: UUID,
        data: ReservationPeriodUpdate,
    ) -> Result[Reservation]:
        """초안 예약의 기간을 변경합니다.

        Change the period of a Draft reservation. The new start must be in
        the future and the new period must pass the conflict policy
        (excluding this reservation). On any failure the stored period is
        left untouched.
        """
        context = "ReservationService.change_period"
        reservation: Reservation | None = await reservation_repository.find_by_id(db, reservation_id)
        if reservation is None:
            return log_if_failure(
                logger, context, Result.fail(ReservationErrors.NOT_FOUND), reservation_id=reservation_id
            )
        if reservation.status is not ReservationStatus.DRAFT:
            return log_if_failure(
                logger,
                context,
                Result.fail(ReservationErrors.INVALID_STATUS_TRANSITION),
                reservation_id=reservation_id,
                status=reservation.status.value,
            )

        period_result = RentalPeriod.create(data.start, data.end)
        if period_result.is_failure:
            return log_if_failure(logger, context, Result.fail(period_result.error), reservation_id=reservation_id)
        period: RentalPeriod = period_result.value

        now: datetime = self._clock()
        if period.start <= now:
            return log_if_failure(
                logger, context, Result.fail(ReservationErrors.START_DATE_IN_PAST), reservation_id=reservation_id
            )

        conflict_result = await self._check_conflict(db, reservation.car_category, period, reservation.id)
        if conflict_result.is_failure:
            return log_if_failure(logger, context, Result.fail(conflict_result.error), reservation_id=reservation_id)

        result = reservation.change_period(period.start, period.end)
        if result.is_failure:
            return log_if_failure(logger, context, Result.fail(result.error), reservation_id=reservation_id)

        await reservation_repository.save(db, reservation)
        logger.info("Reservation period changed reservation_id=%s", reservation_id)
        return Result.ok(reservation)

    async def confirm(self, db: AsyncSession, reservation_id: UUID) -> Result[Reservation]:
        """초안 예약을 확정합니다.

        Confirm a Draft reservation when the conflict policy finds free
        capacity for its category and period.

        Returns:
            Result[Reservation]: 확정 예약 또는 NotFound / NoCategoryCapacity /
                OverCapacity / InvalidStatusTransition / InvalidTimestamp
        """
        context = "ReservationService.confirm"
        reservation: Reservation | None = await reservation_repository.find_by_id(db, reservation_id)
        if reservation is None:
            return log_if_failure(
                logger, context, Result.fail(ReservationErrors.NOT_FOUND), reservation_id=reservation_id
            )
        if reservation.status is not ReservationStatus.DRAFT:
            return log_if_failure(
                logger,
                context,
                Result.fail(ReservationErrors.INVALID_STATUS_TRANSITION),
                reservation_id=reservation_id,
                status=reservation.status.value,
            )

        conflict_result = await self._check_conflict(db, reservation.car_category, reservation.period, reservation.id)
        if conflict_result.is_failure:
            return log_if_failure(
                logger,
                context,
                Result.fail(conflict_result.error),
                reservation_id=reservation_id,
                category=reservation.car_category.value,
            )

        result = reservation.confirm(self._clock())
        if result.is_failure:
            return log_if_failure(logger, context, Result.fail(result.error), reservation_id=reservation_id)

        await reservation_repository.save(db, reservation)
        logger.info("Reservation confirmed reservation_id=%s", reservation_id)
        return Result.ok(reservation)

    async def cancel(self, db: AsyncSession, reservation_id: UUID) -> Result[Reservation]:
        """예약을 취소합니다 (Draft/Confirmed → Cancelled).

        Cancel a reservation. A second cancel, or cancelling a reservation
        already picked up, is an invalid status transition.
        """
        context = "ReservationService.cancel"
        reservation: Reservation | None = await reservation_repository.find_by_id(db, reservation_id)
        if reservation is None:
            return log_if_failure(
                logger, context, Result.fail(ReservationErrors.NOT_FOUND), reservation_id=reservation_id
            )

        result = reservation.cancel(self._clock())
        if result.is_failure:
            return log_if_failure(
                logger, context, Result.fail(result.error), reservation_id=reservation_id, status=reservation.status.value
            )

        await reservation_repository.save(db, reservation)
        logger.info("Reservation cancelled reservation_id=%s", reservation_id)
        return Result.ok(reservation)

    async def expire_drafts(self, db: AsyncSession) -> Result[int]:
        """오래된 초안 예약을 일괄 만료합니다.

        Expire every Draft whose ``created_at`` is at least the configured
        draft lifetime in the past. Individual failures are logged and
        skipped.

        Returns:
            Result[int]: 만료된 예약 수 (Number of reservations expired)
        """
        now: datetime = self._clock()
        minutes: int = (
            self._draft_expiry_minutes if self._draft_expiry_minutes is not None else settings.DRAFT_EXPIRY_MINUTES
        )
        cutoff: datetime = now - timedelta(minutes=minutes)

        drafts: list[Reservation] = await reservation_repository.select_drafts_to_expire(db, cutoff)
        logger.info("Draft expiry started now=%s cutoff=%s candidates=%d", now.isoformat(), cutoff.isoformat(), len(drafts))

        expired: int = 0
        for reservation in drafts:
            result = reservation.expire(now)
            if result.is_failure:
                log_if_failure(logger, "ReservationService.expire_drafts", result, reservation_id=reservation.id)
                continue
            await reservation_repository.save(db, reservation)
            expired += 1

        logger.info("Draft expiry finished expired=%d", expired)
        return Result.ok(expired)


# 싱글턴 인스턴스: Singleton instance
reservation_service: ReservationService = ReservationService()
