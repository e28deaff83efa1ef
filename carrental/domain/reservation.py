"""예약 애그리거트와 상태 머신.

Reservation aggregate and its state machine.

The lifecycle state is a tagged union of frozen dataclasses. Each
variant carries only the fields that are valid in that state, so a
Draft can never have a ``confirmed_at`` and an Expired reservation can
never be linked to a rental.

    Draft ──confirm──▶ Confirmed ──mark_as_rented──▶ Confirmed(rental_id)
      │                    │
      ├──cancel──▶ Cancelled ◀──cancel (not yet rented)
      └──expire──▶ Expired

Every mutation returns a Result; a failed transition leaves the
aggregate untouched.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Union
from uuid import UUID

from carrental.domain.enums import CarCategory, ReservationStatus
from carrental.domain.errors import ReservationErrors
from carrental.domain.period import RentalPeriod, as_utc
from carrental.domain.result import Result


@dataclass(frozen=True)
class Draft:
    """초안: 기간 수정 가능 (Period can still change)."""


@dataclass(frozen=True)
class Confirmed:
    """확정: 용량을 차지하며, 픽업 시 대여와 연결됩니다."""

    confirmed_at: datetime
    rental_id: UUID | None = None


@dataclass(frozen=True)
class Cancelled:
    """취소: 종료 상태 (Terminal)."""

    cancelled_at: datetime
    confirmed_at: datetime | None = None


@dataclass(frozen=True)
class Expired:
    """만료: 종료 상태 (Terminal)."""

    expired_at: datetime


ReservationState = Union[Draft, Confirmed, Cancelled, Expired]

_STATUS_BY_STATE: dict[type, ReservationStatus] = {
    Draft: ReservationStatus.DRAFT,
    Confirmed: ReservationStatus.CONFIRMED,
    Cancelled: ReservationStatus.CANCELLED,
    Expired: ReservationStatus.EXPIRED,
}

# 취소 계약: 취소는 멱등이 아닙니다. 이미 취소된 예약의 재취소는 실패합니다.
# Cancel contract: only these statuses may be cancelled. Cancel is NOT
# idempotent; cancelling a Cancelled reservation is an invalid transition.
CANCELLABLE_STATUSES: frozenset[ReservationStatus] = frozenset(
    {ReservationStatus.DRAFT, ReservationStatus.CONFIRMED}
)


@dataclass(eq=False)
class Reservation:
    """예약 애그리거트.

    Reservation aggregate. All state changes go through its methods.

    Attributes:
        id: 예약 UUID (Reservation identifier)
        customer_id: 고객 UUID (Customer identifier)
        car_category: 예약한 차량 등급 (Reserved car category)
        period: 대여 기간 (Rental period)
        created_at: 생성 시각 UTC (Creation time)
        state: 현재 상태 변형 (Current state variant)
    """

    id: UUID
    customer_id: UUID
    car_category: CarCategory
    period: RentalPeriod
    created_at: datetime
    state: ReservationState = field(default_factory=Draft)

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        customer_id: UUID,
        car_category: CarCategory,
        start: datetime,
        end: datetime,
        created_at: datetime,
        reservation_id: UUID | None = None,
    ) -> Result["Reservation"]:
        """초안 상태의 예약을 생성합니다.

        Create a reservation in Draft. Only domain invariants are enforced
        here (a valid period); context rules such as "start must be in the
        future" belong to the use case.

        Args:
            customer_id: 고객 UUID (Customer identifier)
            car_category: 차량 등급 (Car category)
            start: 시작 시각 (Period start)
            end: 종료 시각 (Period end)
            created_at: 생성 시각 (Creation time)
            reservation_id: 지정 ID, 없으면 새로 생성 (Optional explicit id)

        Returns:
            Result[Reservation]: 초안 예약 또는 InvalidPeriod
        """
        period_result = RentalPeriod.create(start, end)
        if period_result.is_failure:
            return Result.fail(period_result.error)

        return Result.ok(
            cls(
                id=reservation_id or uuid.uuid4(),
                customer_id=customer_id,
                car_category=car_category,
                period=period_result.value,
                created_at=as_utc(created_at),
            )
        )

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------
    @property
    def status(self) -> ReservationStatus:
        return _STATUS_BY_STATE[type(self.state)]

    @property
    def confirmed_at(self) -> datetime | None:
        if isinstance(self.state, (Confirmed, Cancelled)):
            return self.state.confirmed_at
        return None

    @property
    def cancelled_at(self) -> datetime | None:
        return self.state.cancelled_at if isinstance(self.state, Cancelled) else None

    @property
    def expired_at(self) -> datetime | None:
        return self.state.expired_at if isinstance(self.state, Expired) else None

    @property
    def rental_id(self) -> UUID | None:
        return self.state.rental_id if isinstance(self.state, Confirmed) else None

    @property
    def is_terminal(self) -> bool:
        return isinstance(self.state, (Cancelled, Expired))

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def change_period(self, start: datetime, end: datetime) -> Result[None]:
        """초안 예약의 기간을 변경합니다 (Draft only)."""
        if not isinstance(self.state, Draft):
            return Result.fail(ReservationErrors.INVALID_STATUS_TRANSITION)

        period_result = RentalPeriod.create(start, end)
        if period_result.is_failure:
            return Result.fail(period_result.error)

        self.period = period_result.value
        return Result.ok()

    def confirm(self, confirmed_at: datetime) -> Result[None]:
        """Draft → Confirmed. 충돌 검사는 호출자(유스케이스)가 먼저 수행합니다.

        The conflict check is the caller's job and must pass first.
        """
        if not isinstance(self.state, Draft):
            return Result.fail(ReservationErrors.INVALID_STATUS_TRANSITION)
        confirmed_at = as_utc(confirmed_at)
        if confirmed_at < self.created_at:
            return Result.fail(ReservationErrors.INVALID_TIMESTAMP)

        self.state = Confirmed(confirmed_at=confirmed_at)
        return Result.ok()

    def cancel(self, cancelled_at: datetime) -> Result[None]:
        """Draft/Confirmed → Cancelled.

        A confirmed reservation already linked to a rental cannot be
        cancelled. A second cancel fails (see ``CANCELLABLE_STATUSES``).
        """
        if self.status not in CANCELLABLE_STATUSES or self.rental_id is not None:
            return Result.fail(ReservationErrors.INVALID_STATUS_TRANSITION)
        cancelled_at = as_utc(cancelled_at)
        if cancelled_at < self.created_at:
            return Result.fail(ReservationErrors.INVALID_TIMESTAMP)

        self.state = Cancelled(cancelled_at=cancelled_at, confirmed_at=self.confirmed_at)
        return Result.ok()

    def expire(self, expired_at: datetime) -> Result[None]:
        """Draft → Expired (일괄 만료 작업에서 호출)."""
        if not isinstance(self.state, Draft):
            return Result.fail(ReservationErrors.INVALID_STATUS_TRANSITION)
        expired_at = as_utc(expired_at)
        if expired_at < self.created_at:
            return Result.fail(ReservationErrors.INVALID_TIMESTAMP)

        self.state = Expired(expired_at=expired_at)
        return Result.ok()

    def mark_as_rented(self, rental_id: UUID) -> Result[None]:
        """확정 예약을 대여와 연결합니다: 같은 대여 ID로는 멱등.

        Link a confirmed reservation to its rental. Idempotent for the same
        rental id; a different rental id is rejected.
        """
        state = self.state
        if not isinstance(state, Confirmed):
            return Result.fail(ReservationErrors.INVALID_STATUS_TRANSITION)
        if state.rental_id == rental_id:
            return Result.ok()
        if state.rental_id is not None:
            return Result.fail(ReservationErrors.INVALID_STATUS_TRANSITION)

        self.state = Confirmed(confirmed_at=state.confirmed_at, rental_id=rental_id)
        return Result.ok()
