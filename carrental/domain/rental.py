"""대여 애그리거트.

Rental aggregate: created at pickup from a confirmed reservation and
completed at return. The return readings live in a single optional
``RentalReturn`` value, so a rental is either fully returned or not at
all.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from carrental.domain.enums import FuelLevel, RentalStatus
from carrental.domain.errors import RentalErrors
from carrental.domain.period import as_utc
from carrental.domain.result import Result


def parse_fuel_level(value: Any) -> FuelLevel | None:
    """정수 또는 이름을 FuelLevel로 변환합니다. 범위 밖이면 None.

    Accept a FuelLevel, its integer value (0-4) as an int or a digit
    string, or its lowercase name.
    """
    if isinstance(value, FuelLevel):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value)
    if isinstance(value, int):
        try:
            return FuelLevel(value)
        except ValueError:
            return None
    if isinstance(value, str):
        try:
            return FuelLevel[value.strip().upper()]
        except KeyError:
            return None
    return None


def _valid_km(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True)
class RentalReturn:
    """반납 기록 (Return readings)."""

    km_in: int
    fuel_in: FuelLevel
    returned_at: datetime


@dataclass(eq=False)
class Rental:
    """대여 애그리거트.

    Attributes:
        id: 대여 UUID (Rental identifier)
        reservation_id: 원 예약 UUID (Source reservation)
        customer_id: 고객 UUID (Customer)
        car_id: 차량 UUID (Car handed over at pickup)
        km_out: 출고 주행거리 (Odometer at pickup, >= 0)
        fuel_out: 출고 연료 (Fuel level at pickup)
        picked_up_at: 픽업 시각 UTC (Pickup time)
        returned: 반납 기록, 반납 전에는 None (Return readings or None)
    """

    id: UUID
    reservation_id: UUID
    customer_id: UUID
    car_id: UUID
    km_out: int
    fuel_out: FuelLevel
    picked_up_at: datetime
    returned: RentalReturn | None = None

    @classmethod
    def pickup(
        cls,
        reservation_id: UUID,
        customer_id: UUID,
        car_id: UUID,
        fuel_out: Any,
        km_out: Any,
        picked_up_at: datetime,
        rental_id: UUID | None = None,
    ) -> Result["Rental"]:
        """픽업 시점에 대여를 생성합니다.

        Create an active rental at pickup.

        Returns:
            Result[Rental]: 대여 또는 InvalidFuelLevel / InvalidKm
        """
        fuel = parse_fuel_level(fuel_out)
        if fuel is None:
            return Result.fail(RentalErrors.INVALID_FUEL_LEVEL)
        if not _valid_km(km_out):
            return Result.fail(RentalErrors.INVALID_KM)

        return Result.ok(
            cls(
                id=rental_id or uuid.uuid4(),
                reservation_id=reservation_id,
                customer_id=customer_id,
                car_id=car_id,
                km_out=km_out,
                fuel_out=fuel,
                picked_up_at=as_utc(picked_up_at),
            )
        )

    @property
    def status(self) -> RentalStatus:
        return RentalStatus.ACTIVE if self.returned is None else RentalStatus.COMPLETED

    @property
    def is_returned(self) -> bool:
        return self.returned is not None

    @property
    def km_in(self) -> int | None:
        return self.returned.km_in if self.returned else None

    @property
    def fuel_in(self) -> FuelLevel | None:
        return self.returned.fuel_in if self.returned else None

    @property
    def returned_at(self) -> datetime | None:
        return self.returned.returned_at if self.returned else None

    def return_car(self, fuel_in: Any, km_in: Any, returned_at: datetime) -> Result[None]:
        """차량을 반납하고 대여를 완료합니다.

        Record the return readings. Fails without mutation when the rental
        was already returned, the return time precedes pickup, the fuel level
        is out of range or the odometer went backwards.
        """
        if self.returned is not None:
            return Result.fail(RentalErrors.INVALID_STATUS_TRANSITION)

        returned_at = as_utc(returned_at)
        if returned_at < self.picked_up_at:
            return Result.fail(RentalErrors.INVALID_TIMESTAMP)

        fuel = parse_fuel_level(fuel_in)
        if fuel is None:
            return Result.fail(RentalErrors.INVALID_FUEL_LEVEL)
        if not _valid_km(km_in) or km_in < self.km_out:
            return Result.fail(RentalErrors.INVALID_KM)

        self.returned = RentalReturn(km_in=km_in, fuel_in=fuel, returned_at=returned_at)
        return Result.ok()
