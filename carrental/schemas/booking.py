"""예약 및 대여 관련 Pydantic 요청/응답 스키마 정의.

Booking (reservation and rental) Pydantic request/response schema
definitions.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from carrental.domain.enums import CarCategory, FuelLevel, RentalStatus, ReservationStatus


# === 예약 (Reservation) 스키마 ===

class ReservationCreate(BaseModel):
    """예약 생성 요청 스키마.

    Reservation creation request schema. The reservation starts in Draft
    and must be confirmed to take capacity.

    Attributes:
        customer_id: 고객 UUID (Customer identifier)
        car_category: 차량 등급 (Requested car category)
        start: 기간 시작, 미래여야 함 (Period start, must be in the future)
        end: 기간 종료 (Period end, exclusive)
    """

    customer_id: UUID
    car_category: CarCategory
    start: datetime
    end: datetime


class ReservationPeriodUpdate(BaseModel):
    """예약 기간 변경 요청 스키마 (Draft only)."""

    start: datetime
    end: datetime


class ReservationResponse(BaseModel):
    """예약 응답 스키마.

    Reservation response schema. Lifecycle timestamps are null unless
    the reservation went through the matching transition.
    """

    id: str  # 예약 UUID 문자열 (Reservation UUID as string)
    customer_id: str
    car_category: CarCategory
    start: datetime
    end: datetime
    status: ReservationStatus
    created_at: datetime
    confirmed_at: datetime | None = None
    cancelled_at: datetime | None = None
    expired_at: datetime | None = None
    rental_id: str | None = None


class ExpireDraftsResponse(BaseModel):
    """초안 만료 배치 결과 (Number of drafts expired)."""

    expired: int


# === 대여 (Rental) 스키마 ===

class RentalPickup(BaseModel):
    """픽업 요청 스키마.

    Pickup request schema. ``fuel_out`` accepts the ordinal value (0-4)
    or the level name ("full", "half", ...); the domain validates both.

    Attributes:
        reservation_id: 확정 예약 UUID (Confirmed reservation)
        customer_id: 고객 UUID, 예약 고객과 일치해야 함 (Must match the reservation)
        car_id: 인도 차량 UUID (Car handed over)
        fuel_out: 출고 연료 (Fuel level at pickup)
        km_out: 출고 주행거리 (Odometer at pickup)
    """

    reservation_id: UUID
    customer_id: UUID
    car_id: UUID
    fuel_out: int | str
    km_out: int


class RentalReturnRequest(BaseModel):
    """반납 요청 스키마 (Return readings)."""

    fuel_in: int | str
    km_in: int


class RentalResponse(BaseModel):
    """대여 응답 스키마 (Rental response schema)."""

    id: str  # 대여 UUID 문자열 (Rental UUID as string)
    reservation_id: str
    customer_id: str
    car_id: str
    status: RentalStatus
    km_out: int
    fuel_out: FuelLevel
    picked_up_at: datetime
    km_in: int | None = None
    fuel_in: FuelLevel | None = None
    returned_at: datetime | None = None
