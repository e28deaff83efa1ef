"""고객 서비스: 고객 등록/조회/차단 비즈니스 로직.

Customer Service: Registration, lookup and blocking of customers.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from carrental.domain.errors import CustomerErrors
from carrental.domain.result import Result, log_if_failure
from carrental.models.customer import Customer
from carrental.models.types import utc_now
from carrental.repositories.customer_repository import customer_repository
from carrental.schemas.common import PaginatedResponse
from carrental.schemas.customer import CustomerCreate, CustomerResponse

logger = logging.getLogger(__name__)


class CustomerService:
    """고객 관련 비즈니스 로직을 처리하는 서비스 (Customer business logic)."""

    def to_response(self, customer: Customer) -> CustomerResponse:
        return CustomerResponse(
            id=str(customer.id),
            first_name=customer.first_name,
            last_name=customer.last_name,
            email=customer.email,
            phone=customer.phone,
            is_blocked=customer.is_blocked,
            created_at=customer.created_at,
        )

    async def create_customer(self, db: AsyncSession, data: CustomerCreate) -> Result[Customer]:
        """새 고객을 등록합니다.

        Register a customer. Names are trimmed and the email is stored
        lowercased; the email must be unique.

        Returns:
            Result[Customer]: 등록된 고객 또는 RequiredField / EmailExists
        """
        first_name: str = data.first_name.strip()
        last_name: str = data.last_name.strip()
        email: str = data.email.strip().lower()

        if not first_name or not last_name or not email:
            return log_if_failure(logger, "CustomerService.create_customer", Result.fail(CustomerErrors.REQUIRED_FIELD))
        if await customer_repository.get_by_email(db, email) is not None:
            return log_if_failure(
                logger, "CustomerService.create_customer", Result.fail(CustomerErrors.EMAIL_EXISTS)
            )

        phone: str | None = data.phone.strip() if data.phone else None
        customer: Customer = await customer_repository.insert(
            db,
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone or None,
            is_blocked=False,
            created_at=utc_now(),
        )
        logger.info("Customer created customer_id=%s", customer.id)
        return Result.ok(customer)

    async def get_customer(self, db: AsyncSession, customer_id: UUID) -> Result[Customer]:
        customer: Customer | None = await customer_repository.get_by_id(db, customer_id)
        if customer is None:
            return Result.fail(CustomerErrors.NOT_FOUND)
        return Result.ok(customer)

    async def list_customers(
        self,
        db: AsyncSession,
        keyword: str | None = None,
        page: int = 1,
        per_page: int = 20,
    ) -> PaginatedResponse:
        query = customer_repository.build_list_query(keyword)
        customers, total = await customer_repository.get_paginated(db, query, page, per_page)
        return PaginatedResponse(
            items=[self.to_response(c) for c in customers],
            total=total,
            page=page,
            per_page=per_page,
        )

    async def set_blocked(self, db: AsyncSession, customer_id: UUID, blocked: bool) -> Result[Customer]:
        """고객 차단 상태를 설정합니다: 같은 값으로 다시 호출해도 성공.

        Block or unblock a customer. Setting the current value again is a
        no-op success.
        """
        customer: Customer | None = await customer_repository.get_by_id(db, customer_id)
        if customer is None:
            return log_if_failure(
                logger, "CustomerService.set_blocked", Result.fail(CustomerErrors.NOT_FOUND), customer_id=customer_id
            )

        customer.is_blocked = blocked
        await db.flush()
        logger.info("Customer %s customer_id=%s", "blocked" if blocked else "unblocked", customer_id)
        return Result.ok(customer)

    async def ensure_can_reserve(self, db: AsyncSession, customer_id: UUID) -> Result[Customer]:
        """예약 가능한 고객인지 확인합니다: 존재하고 차단되지 않아야 함.

        The customer must exist and must not be blocked; otherwise
        InvalidCustomer.
        """
        customer: Customer | None = await customer_repository.get_by_id(db, customer_id)
        if customer is None or customer.is_blocked:
            return Result.fail(CustomerErrors.INVALID)
        return Result.ok(customer)


# 싱글턴 인스턴스: Singleton instance
customer_service: CustomerService = CustomerService()
