"""고객 SQLAlchemy ORM 모델 정의.

Customer SQLAlchemy ORM model definition.

Tables:
    - customers: 대여 고객 (Rental customers)
"""

import uuid
from datetime import datetime
from sqlalchemy import String, Boolean, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from carrental.database import Base
from carrental.models.types import UTCDateTime, utc_now


class Customer(Base):
    """고객 모델.

    Customer model. A blocked customer cannot create new reservations.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        first_name: 이름 (First name)
        last_name: 성 (Last name)
        email: 이메일, 전역 고유 (Email, globally unique)
        phone: 연락처 (Phone number, optional)
        is_blocked: 차단 여부 (Blocked flag)
        created_at: 등록 일시 UTC (Creation timestamp)
    """

    __tablename__ = "customers"

    # 고객 고유 식별자: Customer unique identifier
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    # 이메일: 소문자로 정규화하여 저장 (Stored lowercased)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    # 차단 여부: Blocked customers cannot reserve
    is_blocked: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utc_now)
