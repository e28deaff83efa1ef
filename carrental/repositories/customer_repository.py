"""고객 레포지토리: 고객 조회 및 검색 쿼리.

Customer Repository: Customer lookups and search.
"""

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.models.customer import Customer
from carrental.repositories.base import BaseRepository


class CustomerRepository(BaseRepository[Customer]):
    """고객 테이블 레포지토리 (Repository for the customers table)."""

    def __init__(self) -> None:
        super().__init__(Customer)

    async def get_by_email(self, db: AsyncSession, email: str) -> Customer | None:
        result = await db.execute(select(Customer).where(Customer.email == email.lower()))
        return result.scalar_one_or_none()

    def build_list_query(self, keyword: str | None = None) -> Select:
        """고객 목록 쿼리: 이름/이메일 부분 일치 검색.

        Build the customer list query with an optional case-insensitive
        keyword matched against first name, last name and email.
        """
        query: Select = select(Customer)
        if keyword:
            pattern: str = f"%{keyword}%"
            query = query.where(
                or_(
                    Customer.first_name.ilike(pattern),
                    Customer.last_name.ilike(pattern),
                    Customer.email.ilike(pattern),
                )
            )
        return query.order_by(Customer.last_name, Customer.first_name, Customer.email)


# 싱글턴 인스턴스: Singleton instance
customer_repository: CustomerRepository = CustomerRepository()
