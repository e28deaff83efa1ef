"""직원 레포지토리: 직원 조회 및 고유성 검사.

Employee Repository: lookups, uniqueness checks and the staff list.
"""

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.models.employee import Employee
from carrental.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[Employee]):
    """직원 테이블 레포지토리 (Repository for the employees table)."""

    def __init__(self) -> None:
        super().__init__(Employee)

    async def personnel_number_exists(self, db: AsyncSession, personnel_number: str) -> bool:
        query: Select = select(func.count()).select_from(Employee).where(
            Employee.personnel_number == personnel_number
        )
        return ((await db.execute(query)).scalar() or 0) > 0

    async def email_exists(self, db: AsyncSession, email: str) -> bool:
        query: Select = select(func.count()).select_from(Employee).where(Employee.email == email.lower())
        return ((await db.execute(query)).scalar() or 0) > 0

    def build_list_query(self, keyword: str | None = None, is_active: bool | None = None) -> Select:
        """직원 목록 쿼리: 사번/이름/이메일 검색, 재직 여부 필터.

        Staff list ordered by personnel number.
        """
        query: Select = select(Employee)
        if keyword:
            pattern: str = f"%{keyword}%"
            query = query.where(
                or_(
                    Employee.personnel_number.ilike(pattern),
                    Employee.first_name.ilike(pattern),
                    Employee.last_name.ilike(pattern),
                    Employee.email.ilike(pattern),
                )
            )
        if is_active is not None:
            query = query.where(Employee.is_active == is_active)
        return query.order_by(Employee.personnel_number)


# 싱글턴 인스턴스: Singleton instance
employee_repository: EmployeeRepository = EmployeeRepository()
