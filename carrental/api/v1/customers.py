"""고객 라우터: 고객 등록/조회/차단 엔드포인트.

Customer Router: Customer registration, lookup and blocking endpoints.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.database import get_db
from carrental.schemas.common import PaginatedResponse
from carrental.schemas.customer import CustomerCreate, CustomerResponse
from carrental.services.customer_service import customer_service
from carrental.utils.exceptions import unwrap
from carrental.utils.pagination import PageDep

router: APIRouter = APIRouter()


@router.post("/customers", response_model=CustomerResponse, status_code=201)
async def create_customer(
    data: CustomerCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CustomerResponse:
    """새 고객을 등록합니다 (Register a customer)."""
    customer = unwrap(await customer_service.create_customer(db, data))
    await db.commit()
    return customer_service.to_response(customer)


@router.get("/customers", response_model=PaginatedResponse)
async def list_customers(
    db: Annotated[AsyncSession, Depends(get_db)],
    paging: PageDep,
    keyword: str | None = None,
) -> PaginatedResponse:
    """고객 목록을 조회합니다: 이름/이메일 검색.

    List customers, optionally filtered by a name/email keyword.
    """
    return await customer_service.list_customers(db, keyword, paging.page, paging.per_page)


@router.get("/customers/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CustomerResponse:
    return customer_service.to_response(unwrap(await customer_service.get_customer(db, customer_id)))


@router.post("/customers/{customer_id}/block", response_model=CustomerResponse)
async def block_customer(
    customer_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CustomerResponse:
    """고객을 차단합니다: 차단된 고객은 새 예약 불가."""
    customer = unwrap(await customer_service.set_blocked(db, customer_id, True))
    await db.commit()
    return customer_service.to_response(customer)


@router.post("/customers/{customer_id}/unblock", response_model=CustomerResponse)
async def unblock_customer(
    customer_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CustomerResponse:
    customer = unwrap(await customer_service.set_blocked(db, customer_id, False))
    await db.commit()
    return customer_service.to_response(customer)
