"""차량 서비스: 플릿 관리 비즈니스 로직.

Car Service. Business logic for the fleet: registration, status
transitions (maintenance, retirement, pickup/return hand-over) and the
pricing quote.
"""

import logging
import re
from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from carrental.domain.enums import CarCategory, CarStatus
from carrental.domain.errors import CarErrors
from carrental.domain.period import RentalPeriod
from carrental.domain.pricing import quote
from carrental.domain.result import Result, log_if_failure
from carrental.models.fleet import Car
from carrental.models.types import utc_now
from carrental.repositories.car_repository import car_repository
from carrental.schemas.common import PaginatedResponse
from carrental.schemas.fleet import CarCreate, CarResponse, PricingQuoteResponse

logger = logging.getLogger(__name__)

# 번호판 형식: 대문자, 숫자, 하이픈만 허용
_LICENSE_PLATE_RE = re.compile(r"^[A-Z0-9\-]+$")

# 차량 상태 전이표: Allowed car status transitions
CAR_TRANSITIONS: dict[CarStatus, frozenset[CarStatus]] = {
    CarStatus.AVAILABLE: frozenset({CarStatus.RENTED, CarStatus.MAINTENANCE, CarStatus.RETIRED}),
    CarStatus.RENTED: frozenset({CarStatus.AVAILABLE}),
    CarStatus.MAINTENANCE: frozenset({CarStatus.AVAILABLE, CarStatus.RETIRED}),
    CarStatus.RETIRED: frozenset(),
}


def can_transition(current: CarStatus, target: CarStatus) -> bool:
    return target in CAR_TRANSITIONS.get(current, frozenset())


class CarService:
    """차량 관련 비즈니스 로직을 처리하는 서비스.

    Service handling fleet business logic. Methods return a Result;
    the router commits on success.
    """

    def to_response(self, car: Car) -> CarResponse:
        """차량 모델을 응답 스키마로 변환합니다 (Car model → CarResponse)."""
        return CarResponse(
            id=str(car.id),
            manufacturer=car.manufacturer,
            model=car.model,
            license_plate=car.license_plate,
            category=CarCategory(car.category),
            status=CarStatus(car.status),
            created_at=car.created_at,
            retired_at=car.retired_at,
        )

    async def create_car(self, db: AsyncSession, data: CarCreate) -> Result[Car]:
        """새 차량을 등록합니다.

        Register a car in status ``available``.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 차량 생성 데이터 (Car creation data)

        Returns:
            Result[Car]: 등록된 차량 또는 RequiredField / InvalidLicensePlate /
                LicensePlateExists
        """
        manufacturer: str = data.manufacturer.strip()
        model: str = data.model.strip()
        plate: str = data.license_plate.strip()

        if not manufacturer or not model or not plate:
            return log_if_failure(logger, "CarService.create_car", Result.fail(CarErrors.REQUIRED_FIELD))
        if not _LICENSE_PLATE_RE.match(plate):
            return log_if_failure(
                logger, "CarService.create_car", Result.fail(CarErrors.INVALID_LICENSE_PLATE), license_plate=plate
            )
        if await car_repository.license_plate_exists(db, plate):
            return log_if_failure(
                logger, "CarService.create_car", Result.fail(CarErrors.LICENSE_PLATE_EXISTS), license_plate=plate
            )

        car: Car = await car_repository.insert(
            db,
            manufacturer=manufacturer,
            model=model,
            license_plate=plate,
            category=data.category.value,
            status=CarStatus.AVAILABLE.value,
            created_at=utc_now(),
        )
        logger.info("Car created car_id=%s plate=%s category=%s", car.id, plate, car.category)
        return Result.ok(car)

    async def get_car(self, db: AsyncSession, car_id: UUID) -> Result[Car]:
        car: Car | None = await car_repository.get_by_id(db, car_id)
        if car is None:
            return Result.fail(CarErrors.NOT_FOUND)
        return Result.ok(car)

    async def list_cars(
        self,
        db: AsyncSession,
        category: CarCategory | None = None,
        status: CarStatus | None = None,
        page: int = 1,
        per_page: int = 20,
    ) -> PaginatedResponse:
        """차량 목록을 조회합니다 (List cars, paginated)."""
        query = car_repository.build_list_query(category=category, status=status)
        cars, total = await car_repository.get_paginated(db, query, page, per_page)
        return PaginatedResponse(
            items=[self.to_response(c) for c in cars],
            total=total,
            page=page,
            per_page=per_page,
        )

    async def _transition(
        self,
        db: AsyncSession,
        car_id: UUID,
        target: CarStatus,
        context: str,
        expected: CarStatus | None = None,
    ) -> Result[Car]:
        """차량 상태를 전이합니다.

        Move a car to ``target``. When ``expected`` is given the current
        status must equal it, on top of the transition table.
        """
        car: Car | None = await car_repository.get_by_id(db, car_id)
        if car is None:
            return log_if_failure(logger, context, Result.fail(CarErrors.NOT_FOUND), car_id=car_id)

        current = CarStatus(car.status)
        if (expected is not None and current is not expected) or not can_transition(current, target):
            return log_if_failure(
                logger,
                context,
                Result.fail(CarErrors.INVALID_STATUS_TRANSITION),
                car_id=car_id,
                current=current.value,
                target=target.value,
            )

        car.status = target.value
        if target is CarStatus.RETIRED:
            car.retired_at = utc_now()
        await db.flush()
        logger.info("%s done car_id=%s %s->%s", context, car_id, current.value, target.value)
        return Result.ok(car)

    async def send_to_maintenance(self, db: AsyncSession, car_id: UUID) -> Result[Car]:
        """대여 가능 차량을 정비로 보냅니다 (available → maintenance)."""
        return await self._transition(
            db, car_id, CarStatus.MAINTENANCE, "CarService.send_to_maintenance", expected=CarStatus.AVAILABLE
        )

    async def return_from_maintenance(self, db: AsyncSession, car_id: UUID) -> Result[Car]:
        """정비 완료 (maintenance → available)."""
        return await self._transition(
            db, car_id, CarStatus.AVAILABLE, "CarService.return_from_maintenance", expected=CarStatus.MAINTENANCE
        )

    async def retire(self, db: AsyncSession, car_id: UUID) -> Result[Car]:
        """차량을 폐차 처리합니다: 대여 중이거나 이미 폐차된 차량은 불가.

        Retire a car that is neither rented nor already retired.
        """
        return await self._transition(db, car_id, CarStatus.RETIRED, "CarService.retire")

    async def mark_rented(self, db: AsyncSession, car_id: UUID) -> Result[Car]:
        """픽업 시 차량을 대여 중으로 표시합니다 (available → rented)."""
        return await self._transition(db, car_id, CarStatus.RENTED, "CarService.mark_rented", expected=CarStatus.AVAILABLE)

    async def mark_available(self, db: AsyncSession, car_id: UUID) -> Result[Car]:
        """반납 시 차량을 대여 가능으로 되돌립니다 (rented → available)."""
        return await self._transition(
            db, car_id, CarStatus.AVAILABLE, "CarService.mark_available", expected=CarStatus.RENTED
        )

    def pricing_quote(
        self,
        category: CarCategory,
        start: datetime,
        end: datetime,
    ) -> Result[PricingQuoteResponse]:
        """기간과 등급으로 가격 견적을 계산합니다.

        Price a period for a category. Fails with InvalidPeriod when
        ``start >= end``.
        """
        period_result = RentalPeriod.create(start, end)
        if period_result.is_failure:
            return Result.fail(period_result.error)

        period: RentalPeriod = period_result.value
        q = quote(category, period)
        return Result.ok(
            PricingQuoteResponse(
                category=category,
                start=period.start,
                end=period.end,
                days=q.days,
                price_per_day=q.price_per_day,
                discount_percent=q.discount_percent,
                total=q.total,
            )
        )


# 싱글턴 인스턴스: Singleton instance
car_service: CarService = CarService()
