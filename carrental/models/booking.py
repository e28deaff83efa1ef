"""예약 및 대여 SQLAlchemy ORM 모델 정의.

Booking SQLAlchemy ORM model definitions. These rows are the persisted
form of the Reservation and Rental aggregates; repositories map them to
and from the domain objects.

Tables:
    - reservations: 등급 단위 예약 (Category-level reservations)
    - rentals: 차량 단위 대여 (Car-level rentals created at pickup)
"""

import uuid
from datetime import datetime
from sqlalchemy import String, Integer, ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from carrental.database import Base
from carrental.models.types import UTCDateTime


class ReservationRecord(Base):
    """예약 레코드.

    Persisted reservation. The lifecycle timestamps are filled according
    to ``status``: ``confirmed_at`` for confirmed (and cancelled-after-
    confirm) rows, ``cancelled_at`` / ``expired_at`` for terminal rows.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        customer_id: 고객 FK (Customer foreign key)
        car_category: 예약 등급 (Reserved car category)
        start_at: 기간 시작, 포함 (Inclusive period start, UTC)
        end_at: 기간 종료, 미포함 (Exclusive period end, UTC)
        status: 예약 상태 (draft, confirmed, cancelled, expired)
        created_at: 생성 일시 UTC (Creation timestamp)
        confirmed_at: 확정 일시 (Confirmation timestamp)
        cancelled_at: 취소 일시 (Cancellation timestamp)
        expired_at: 만료 일시 (Expiry timestamp)
        rental_id: 연결된 대여 ID (Linked rental, set at pickup)
    """

    __tablename__ = "reservations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 고객 FK: Customer (RESTRICT: 예약이 있는 고객은 삭제 불가)
    customer_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False)
    car_category: Mapped[str] = mapped_column(String(20), nullable=False)
    # 반개구간 [start_at, end_at): Half-open period
    start_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    end_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="draft")
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    confirmed_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
    cancelled_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
    expired_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
    # 대여 ID: rentals.reservation_id 쪽에서 FK로 연결 (FK lives on rentals)
    rental_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)

    __table_args__ = (
        # 충돌 검사 조회용: Conflict check lookups
        Index("ix_reservations_category_status", "car_category", "status"),
        # 초안 만료 배치용: Draft expiry batch
        Index("ix_reservations_status_created_at", "status", "created_at"),
    )


class RentalRecord(Base):
    """대여 레코드.

    Persisted rental. ``km_in``, ``fuel_in`` and ``returned_at`` are
    either all null (active) or all set (completed). At most one rental
    exists per reservation.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        reservation_id: 원 예약 FK, 고유 (Source reservation, unique)
        customer_id: 고객 FK (Customer foreign key)
        car_id: 차량 FK (Car foreign key)
        km_out: 출고 주행거리 (Odometer at pickup)
        fuel_out: 출고 연료 0-4 (Fuel level at pickup)
        picked_up_at: 픽업 일시 UTC (Pickup timestamp)
        km_in: 반납 주행거리 (Odometer at return)
        fuel_in: 반납 연료 0-4 (Fuel level at return)
        returned_at: 반납 일시 UTC (Return timestamp)
    """

    __tablename__ = "rentals"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 예약당 대여는 최대 1건: One rental per reservation
    reservation_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("reservations.id", ondelete="RESTRICT"), unique=True, nullable=False
    )
    customer_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False)
    car_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("cars.id", ondelete="RESTRICT"), nullable=False)
    km_out: Mapped[int] = mapped_column(Integer, nullable=False)
    fuel_out: Mapped[int] = mapped_column(Integer, nullable=False)
    picked_up_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    km_in: Mapped[int | None] = mapped_column(Integer, nullable=True)
    fuel_in: Mapped[int | None] = mapped_column(Integer, nullable=True)
    returned_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)

    __table_args__ = (
        Index("ix_rentals_car_id", "car_id"),
    )
