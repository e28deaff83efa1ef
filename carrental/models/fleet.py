"""차량(플릿) 관련 SQLAlchemy ORM 모델 정의.

Fleet SQLAlchemy ORM model definitions.

Tables:
    - cars: 대여 차량 (Rentable cars, classified by category)
"""

import uuid
from datetime import datetime
from sqlalchemy import String, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from carrental.database import Base
from carrental.domain.enums import CarStatus
from carrental.models.types import UTCDateTime, utc_now


class Car(Base):
    """차량 모델: 등급별 플릿의 한 대.

    Car model: one unit of the fleet. Its category decides which
    reservations it can serve; only available and rented cars count as
    category capacity.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        manufacturer: 제조사 (Manufacturer, e.g. "Toyota")
        model: 모델명 (Model name, e.g. "Corolla")
        license_plate: 번호판, 전역 고유 (License plate, globally unique)
        category: 차량 등급 (economy, compact, midsize, suv)
        status: 차량 상태 (available, rented, maintenance, retired)
        created_at: 등록 일시 UTC (Creation timestamp)
        retired_at: 폐차 일시 UTC (Retirement timestamp, nullable)
    """

    __tablename__ = "cars"

    # 차량 고유 식별자: Car unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 제조사: Manufacturer
    manufacturer: Mapped[str] = mapped_column(String(100), nullable=False)
    # 모델명: Model name
    model: Mapped[str] = mapped_column(String(100), nullable=False)
    # 번호판: License plate (uppercase letters, digits, hyphens)
    license_plate: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    # 차량 등급: Car category
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    # 차량 상태: Car status (default: available)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=CarStatus.AVAILABLE.value)
    # 등록 일시: Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utc_now)
    # 폐차 일시: Retirement timestamp (UTC, set once)
    retired_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)

    __table_args__ = (
        Index("ix_cars_category_status", "category", "status"),
    )
