"""대여 서비스: 픽업/반납 유스케이스 오케스트레이션.

Rental Service: Orchestrates pickup and return.
Pickup turns a confirmed reservation into an active rental and hands a
car over; return completes the rental and puts the car back into the
available fleet.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from carrental.domain.enums import CarCategory, CarStatus, RentalStatus
from carrental.domain.errors import RentalErrors
from carrental.domain.rental import Rental
from carrental.domain.result import Result, log_if_failure
from carrental.models.fleet import Car
from carrental.models.types import utc_now
from carrental.repositories.car_repository import car_repository
from carrental.repositories.rental_repository import rental_repository, to_domain
from carrental.schemas.booking import RentalPickup, RentalResponse, RentalReturnRequest
from carrental.schemas.common import PaginatedResponse
from carrental.services import reservation_contracts
from carrental.services.car_service import car_service
from carrental.services.reservation_contracts import ConfirmedReservation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PickupOutcome:
    """픽업 결과: 새로 생성되었는지 여부 포함.

    Attributes:
        rental: 대여 애그리거트 (The rental)
        created: 이번 호출에서 생성되었으면 True (False for a repeated pickup)
    """

    rental: Rental
    created: bool


class RentalService:
    """대여 유스케이스 서비스.

    Rental use-case service.

    Attributes:
        _clock: 현재 UTC 시각 제공자 (Current time provider)
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock: Callable[[], datetime] = clock

    def to_response(self, rental: Rental) -> RentalResponse:
        """대여 애그리거트를 응답 스키마로 변환합니다 (Rental → RentalResponse)."""
        return RentalResponse(
            id=str(rental.id),
            reservation_id=str(rental.reservation_id),
            customer_id=str(rental.customer_id),
            car_id=str(rental.car_id),
            status=rental.status,
            km_out=rental.km_out,
            fuel_out=rental.fuel_out,
            picked_up_at=rental.picked_up_at,
            km_in=rental.km_in,
            fuel_in=rental.fuel_in,
            returned_at=rental.returned_at,
        )

    async def pickup(self, db: AsyncSession, data: RentalPickup) -> Result[PickupOutcome]:
        """확정 예약으로 차량을 픽업합니다.

        Pick up a car for a confirmed reservation.

        A repeated pickup of the same reservation returns the existing
        rental unchanged. Otherwise the reservation must be confirmed, the
        customer must match it, and the car must be available in the
        reserved category. The rental is stored, the car is marked rented
        and the reservation is linked to the rental in the same session.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 픽업 요청 데이터 (Pickup request)

        Returns:
            Result[PickupOutcome]: 대여와 생성 여부, 또는 InvalidReservation /
                InvalidCustomer / InvalidCar / InvalidFuelLevel / InvalidKm
        """
        context = "RentalService.pickup"
        existing: Rental | None = await rental_repository.find_by_reservation_id(db, data.reservation_id)
        if existing is not None:
            logger.info("Pickup repeated reservation_id=%s rental_id=%s", data.reservation_id, existing.id)
            return Result.ok(PickupOutcome(rental=existing, created=False))

        reservation: ConfirmedReservation | None = await reservation_contracts.find_confirmed_by_id(
            db, data.reservation_id
        )
        if reservation is None:
            return log_if_failure(
                logger, context, Result.fail(RentalErrors.INVALID_RESERVATION), reservation_id=data.reservation_id
            )
        if reservation.customer_id != data.customer_id:
            return log_if_failure(
                logger,
                context,
                Result.fail(RentalErrors.INVALID_CUSTOMER),
                reservation_id=data.reservation_id,
                customer_id=data.customer_id,
            )

        car: Car | None = await car_repository.get_by_id(db, data.car_id)
        if (
            car is None
            or CarCategory(car.category) is not reservation.car_category
            or CarStatus(car.status) is not CarStatus.AVAILABLE
        ):
            return log_if_failure(
                logger,
                context,
                Result.fail(RentalErrors.INVALID_CAR),
                reservation_id=data.reservation_id,
                car_id=data.car_id,
            )

        rental_result = Rental.pickup(
            reservation_id=reservation.id,
            customer_id=reservation.customer_id,
            car_id=car.id,
            fuel_out=data.fuel_out,
            km_out=data.km_out,
            picked_up_at=self._clock(),
        )
        if rental_result.is_failure:
            return log_if_failure(
                logger, context, rental_result, reservation_id=data.reservation_id, fuel_out=data.fuel_out, km_out=data.km_out
            )

        rental: Rental = rental_result.value
        await rental_repository.add(db, rental)

        car_result = await car_service.mark_rented(db, car.id)
        if car_result.is_failure:
            return log_if_failure(logger, context, Result.fail(RentalErrors.INVALID_CAR), car_id=car.id)

        link_result = await reservation_contracts.mark_as_rented(db, reservation.id, rental.id)
        if link_result.is_failure:
            return log_if_failure(
                logger, context, Result.fail(RentalErrors.INVALID_RESERVATION), reservation_id=reservation.id
            )

        logger.info(
            "Pickup done rental_id=%s reservation_id=%s car_id=%s", rental.id, reservation.id, car.id
        )
        return Result.ok(PickupOutcome(rental=rental, created=True))

    async def return_car(
        self,
        db: AsyncSession,
        rental_id: UUID,
        data: RentalReturnRequest,
    ) -> Result[Rental]:
        """차량을 반납합니다.

        Return the car of an active rental and make the car available.

        Returns:
            Result[Rental]: 완료된 대여 또는 NotFound / InvalidStatusTransition /
                InvalidTimestamp / InvalidFuelLevel / InvalidKm
        """
        context = "RentalService.return_car"
        rental: Rental | None = await rental_repository.find_by_id(db, rental_id)
        if rental is None:
            return log_if_failure(logger, context, Result.fail(RentalErrors.NOT_FOUND), rental_id=rental_id)

        result = rental.return_car(fuel_in=data.fuel_in, km_in=data.km_in, returned_at=self._clock())
        if result.is_failure:
            return log_if_failure(
                logger, context, Result.fail(result.error), rental_id=rental_id, fuel_in=data.fuel_in, km_in=data.km_in
            )

        await rental_repository.save(db, rental)

        car_result = await car_service.mark_available(db, rental.car_id)
        if car_result.is_failure:
            return log_if_failure(logger, context, Result.fail(car_result.error), rental_id=rental_id, car_id=rental.car_id)

        logger.info("Return done rental_id=%s car_id=%s km_in=%s", rental.id, rental.car_id, rental.km_in)
        return Result.ok(rental)

    async def get(self, db: AsyncSession, rental_id: UUID) -> Result[Rental]:
        rental: Rental | None = await rental_repository.find_by_id(db, rental_id)
        if rental is None:
            return Result.fail(RentalErrors.NOT_FOUND)
        return Result.ok(rental)

    async def list_rentals(
        self,
        db: AsyncSession,
        customer_id: UUID | None = None,
        car_id: UUID | None = None,
        status: RentalStatus | None = None,
        page: int = 1,
        per_page: int = 20,
    ) -> PaginatedResponse:
        query = rental_repository.build_list_query(customer_id=customer_id, car_id=car_id, status=status)
        rows, total = await rental_repository.get_paginated(db, query, page, per_page)
        return PaginatedResponse(
            items=[self.to_response(to_domain(row)) for row in rows],
            total=total,
            page=page,
            per_page=per_page,
        )


# 싱글턴 인스턴스: Singleton instance
rental_service: RentalService = RentalService()
