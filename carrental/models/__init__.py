"""SQLAlchemy ORM 모델 패키지: 모든 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package: Central import point for all models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
``Base.metadata.create_all`` in tests.

Modules:
    fleet: 차량 (Cars)
    customer: 고객 (Customers)
    employee: 직원 (Employees)
    booking: 예약 및 대여 (Reservations and rentals)
    types: 커스텀 컬럼 타입 (UTCDateTime)
"""

from carrental.models.fleet import Car
from carrental.models.customer import Customer
from carrental.models.employee import Employee
from carrental.models.booking import ReservationRecord, RentalRecord

__all__ = [
    "Car",
    "Customer",
    "Employee",
    "ReservationRecord", "RentalRecord",
]
