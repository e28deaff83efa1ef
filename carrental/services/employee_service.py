"""직원 서비스: 직원 등록/비활성화/권한 설정 비즈니스 로직.

Employee Service. Registration, one-way deactivation and replacement
of the admin rights mask.
"""

import logging
from datetime import datetime
from typing import Callable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from carrental.domain.enums import AdminRights, parse_admin_rights
from carrental.domain.errors import EmployeeErrors
from carrental.domain.result import Result, log_if_failure
from carrental.models.employee import Employee
from carrental.models.types import utc_now
from carrental.repositories.employee_repository import employee_repository
from carrental.schemas.common import PaginatedResponse
from carrental.schemas.employee import EmployeeCreate, EmployeeResponse

logger = logging.getLogger(__name__)


def admin_right_names(rights: int) -> list[str]:
    return [flag.name.lower() for flag in AdminRights if flag.value and rights & flag.value]


class EmployeeService:
    """직원 관련 비즈니스 로직을 처리하는 서비스.

    Attributes:
        _clock: 현재 UTC 시각 제공자 (Current time provider)
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock

    def to_response(self, employee: Employee) -> EmployeeResponse:
        return EmployeeResponse(
            id=str(employee.id),
            first_name=employee.first_name,
            last_name=employee.last_name,
            email=employee.email,
            phone=employee.phone,
            personnel_number=employee.personnel_number,
            admin_rights=employee.admin_rights,
            admin_right_names=admin_right_names(employee.admin_rights),
            is_admin=employee.admin_rights != AdminRights.NONE,
            is_active=employee.is_active,
            created_at=employee.created_at,
            deactivated_at=employee.deactivated_at,
        )

    async def create_employee(self, db: AsyncSession, data: EmployeeCreate) -> Result[Employee]:
        """새 직원을 등록합니다.

        Register an active employee. Personnel number and email must both
        be unique; the rights mask may only contain defined flags.

        Returns:
            Result[Employee]: 등록된 직원 또는 RequiredField /
                PersonnelNumberExists / EmailExists / InvalidAdminRights
        """
        context = "EmployeeService.create_employee"
        first_name: str = data.first_name.strip()
        last_name: str = data.last_name.strip()
        email: str = data.email.strip().lower()
        personnel_number: str = data.personnel_number.strip()

        if not first_name or not last_name or not email or not personnel_number:
            return log_if_failure(logger, context, Result.fail(EmployeeErrors.REQUIRED_FIELD))

        rights = parse_admin_rights(data.admin_rights)
        if rights is None:
            return log_if_failure(
                logger, context, Result.fail(EmployeeErrors.INVALID_ADMIN_RIGHTS), admin_rights=data.admin_rights
            )
        if await employee_repository.personnel_number_exists(db, personnel_number):
            return log_if_failure(
                logger,
                context,
                Result.fail(EmployeeErrors.PERSONNEL_NUMBER_EXISTS),
                personnel_number=personnel_number,
            )
        if await employee_repository.email_exists(db, email):
            return log_if_failure(
                logger, context, Result.fail(EmployeeErrors.EMAIL_EXISTS), personnel_number=personnel_number
            )

        phone: str | None = data.phone.strip() if data.phone else None
        employee: Employee = await employee_repository.insert(
            db,
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone or None,
            personnel_number=personnel_number,
            admin_rights=int(rights),
            is_active=True,
            created_at=self._clock(),
        )
        logger.info("Employee created employee_id=%s personnel_number=%s", employee.id, personnel_number)
        return Result.ok(employee)

    async def get_employee(self, db: AsyncSession, employee_id: UUID) -> Result[Employee]:
        employee: Employee | None = await employee_repository.get_by_id(db, employee_id)
        if employee is None:
            return Result.fail(EmployeeErrors.NOT_FOUND)
        return Result.ok(employee)

    async def list_employees(
        self,
        db: AsyncSession,
        keyword: str | None = None,
        is_active: bool | None = None,
        page: int = 1,
        per_page: int = 20,
    ) -> PaginatedResponse:
        query = employee_repository.build_list_query(keyword, is_active)
        employees, total = await employee_repository.get_paginated(db, query, page, per_page)
        return PaginatedResponse(
            items=[self.to_response(e) for e in employees],
            total=total,
            page=page,
            per_page=per_page,
        )

    async def deactivate(self, db: AsyncSession, employee_id: UUID) -> Result[Employee]:
        """직원을 비활성화합니다. 한 번만 가능.

        Deactivate an employee and stamp ``deactivated_at``. A second call
        fails with AlreadyDeactivated and changes nothing.
        """
        context = "EmployeeService.deactivate"
        employee: Employee | None = await employee_repository.get_by_id(db, employee_id)
        if employee is None:
            return log_if_failure(logger, context, Result.fail(EmployeeErrors.NOT_FOUND), employee_id=employee_id)
        if not employee.is_active:
            return log_if_failure(
                logger, context, Result.fail(EmployeeErrors.ALREADY_DEACTIVATED), employee_id=employee_id
            )

        employee.is_active = False
        employee.deactivated_at = self._clock()
        await db.flush()
        logger.info("Employee deactivated employee_id=%s", employee_id)
        return Result.ok(employee)

    async def set_admin_rights(self, db: AsyncSession, employee_id: UUID, admin_rights: int) -> Result[Employee]:
        """관리자 권한을 통째로 교체합니다 (Replace the whole rights mask)."""
        context = "EmployeeService.set_admin_rights"
        employee: Employee | None = await employee_repository.get_by_id(db, employee_id)
        if employee is None:
            return log_if_failure(logger, context, Result.fail(EmployeeErrors.NOT_FOUND), employee_id=employee_id)

        rights = parse_admin_rights(admin_rights)
        if rights is None:
            return log_if_failure(
                logger,
                context,
                Result.fail(EmployeeErrors.INVALID_ADMIN_RIGHTS),
                employee_id=employee_id,
                admin_rights=admin_rights,
            )

        employee.admin_rights = int(rights)
        await db.flush()
        logger.info("Employee admin rights set employee_id=%s rights=%s", employee_id, int(rights))
        return Result.ok(employee)


# 싱글턴 인스턴스: Singleton instance
employee_service: EmployeeService = EmployeeService()
