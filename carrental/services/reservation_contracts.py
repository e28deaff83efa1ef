"""예약 컨텍스트 계약: 대여 유스케이스가 사용하는 읽기/쓰기 파사드.

Reservation contracts: the narrow read and write facades the rental
use cases depend on, so pickup never touches the reservation table or
aggregate directly.
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from carrental.domain.enums import CarCategory
from carrental.domain.errors import ReservationErrors
from carrental.domain.period import RentalPeriod
from carrental.domain.reservation import Reservation
from carrental.domain.result import Result, log_if_failure
from carrental.repositories.reservation_repository import reservation_repository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfirmedReservation:
    """확정 예약 읽기 모델 (Read model of a confirmed reservation)."""

    id: UUID
    customer_id: UUID
    car_category: CarCategory
    period: RentalPeriod
    rental_id: UUID | None


async def find_confirmed_by_id(db: AsyncSession, reservation_id: UUID) -> ConfirmedReservation | None:
    """확정 예약을 조회합니다: 없거나 확정이 아니면 None.

    Return the reservation only when it exists and is Confirmed.
    """
    reservation: Reservation | None = await reservation_repository.find_confirmed_by_id(db, reservation_id)
    if reservation is None:
        return None
    return ConfirmedReservation(
        id=reservation.id,
        customer_id=reservation.customer_id,
        car_category=reservation.car_category,
        period=reservation.period,
        rental_id=reservation.rental_id,
    )


async def mark_as_rented(db: AsyncSession, reservation_id: UUID, rental_id: UUID) -> Result[None]:
    """확정 예약을 대여와 연결합니다: 같은 대여 ID로 다시 호출해도 성공.

    Link a confirmed reservation to its rental. Idempotent for the same
    rental id.
    """
    reservation: Reservation | None = await reservation_repository.find_by_id(db, reservation_id)
    if reservation is None:
        return log_if_failure(
            logger, "reservation_contracts.mark_as_rented", Result.fail(ReservationErrors.NOT_FOUND),
            reservation_id=reservation_id,
        )

    result = reservation.mark_as_rented(rental_id)
    if result.is_failure:
        return log_if_failure(
            logger, "reservation_contracts.mark_as_rented", result,
            reservation_id=reservation_id, rental_id=rental_id,
        )

    await reservation_repository.save(db, reservation)
    return Result.ok()
