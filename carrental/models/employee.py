"""직원 SQLAlchemy ORM 모델 정의.

Employee SQLAlchemy ORM model definition.

Tables:
    - employees: 지점 직원 (Rental staff with admin rights)
"""

import uuid
from datetime import datetime
from sqlalchemy import String, Boolean, Integer, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from carrental.database import Base
from carrental.models.types import UTCDateTime, utc_now


class Employee(Base):
    """직원 모델.

    Employee model. Deactivation is one-way; admin rights are stored as
    the integer value of the ``AdminRights`` flag mask.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        personnel_number: 사번, 전역 고유 (Personnel number, globally unique)
        email: 이메일, 전역 고유 (Email, stored lowercased)
        admin_rights: 권한 비트마스크 (AdminRights bitmask)
        is_active: 재직 여부 (Active flag)
        deactivated_at: 비활성화 일시 UTC (Set once on deactivation)
    """

    __tablename__ = "employees"
    __table_args__ = (
        Index("ix_employees_is_active", "is_active"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    # 사번: Personnel number
    personnel_number: Mapped[str] = mapped_column(String(32), unique=True, nullable=False)
    admin_rights: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utc_now)
    deactivated_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
