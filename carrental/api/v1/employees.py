"""직원 라우터: 직원 등록/조회/비활성화/권한 엔드포인트.

Employee Router: staff registration, lookup, deactivation and admin rights.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.database import get_db
from carrental.schemas.common import PaginatedResponse
from carrental.schemas.employee import AdminRightsUpdate, EmployeeCreate, EmployeeResponse
from carrental.services.employee_service import employee_service
from carrental.utils.exceptions import unwrap
from carrental.utils.pagination import PageDep

router: APIRouter = APIRouter()


@router.post("/employees", response_model=EmployeeResponse, status_code=201)
async def create_employee(
    data: EmployeeCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeResponse:
    """새 직원을 등록합니다 (Register an employee)."""
    employee = unwrap(await employee_service.create_employee(db, data))
    await db.commit()
    return employee_service.to_response(employee)


@router.get("/employees", response_model=PaginatedResponse)
async def list_employees(
    db: Annotated[AsyncSession, Depends(get_db)],
    paging: PageDep,
    keyword: str | None = None,
    is_active: bool | None = None,
) -> PaginatedResponse:
    return await employee_service.list_employees(db, keyword, is_active, paging.page, paging.per_page)


@router.get("/employees/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeResponse:
    return employee_service.to_response(unwrap(await employee_service.get_employee(db, employee_id)))


@router.post("/employees/{employee_id}/deactivate", response_model=EmployeeResponse)
async def deactivate_employee(
    employee_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeResponse:
    """직원을 비활성화합니다: 두 번째 호출은 400."""
    employee = unwrap(await employee_service.deactivate(db, employee_id))
    await db.commit()
    return employee_service.to_response(employee)


@router.put("/employees/{employee_id}/admin-rights", response_model=EmployeeResponse)
async def set_admin_rights(
    employee_id: UUID,
    data: AdminRightsUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeResponse:
    """관리자 권한을 교체합니다 (Replace the admin rights mask)."""
    employee = unwrap(await employee_service.set_admin_rights(db, employee_id, data.admin_rights))
    await db.commit()
    return employee_service.to_response(employee)
