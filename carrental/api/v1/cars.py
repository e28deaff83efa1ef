"""차량 라우터: 플릿 관리 및 가격 견적 엔드포인트.

Car Router: Fleet management and pricing quote endpoints.
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.database import get_db
from carrental.domain.enums import CarCategory, CarStatus
from carrental.schemas.common import PaginatedResponse
from carrental.schemas.fleet import CarCreate, CarResponse, PricingQuoteResponse
from carrental.services.car_service import car_service
from carrental.utils.exceptions import unwrap
from carrental.utils.pagination import PageDep

router: APIRouter = APIRouter()


@router.post("/cars", response_model=CarResponse, status_code=201)
async def create_car(
    data: CarCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CarResponse:
    """새 차량을 등록합니다.

    Register a new car (status ``available``).
    """
    car = unwrap(await car_service.create_car(db, data))
    await db.commit()
    return car_service.to_response(car)


@router.get("/cars", response_model=PaginatedResponse)
async def list_cars(
    db: Annotated[AsyncSession, Depends(get_db)],
    paging: PageDep,
    category: CarCategory | None = None,
    status: CarStatus | None = None,
) -> PaginatedResponse:
    """차량 목록을 조회합니다 (등급/상태 필터)."""
    return await car_service.list_cars(db, category, status, paging.page, paging.per_page)


@router.get("/cars/pricing-quote", response_model=PricingQuoteResponse)
async def pricing_quote(
    category: CarCategory,
    start: Annotated[datetime, Query()],
    end: Annotated[datetime, Query()],
) -> PricingQuoteResponse:
    """등급과 기간으로 가격 견적을 계산합니다.

    Price a rental period for a car category.
    """
    return unwrap(car_service.pricing_quote(category, start, end))


@router.get("/cars/{car_id}", response_model=CarResponse)
async def get_car(
    car_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CarResponse:
    return car_service.to_response(unwrap(await car_service.get_car(db, car_id)))


@router.post("/cars/{car_id}/maintenance", response_model=CarResponse)
async def send_to_maintenance(
    car_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CarResponse:
    """차량을 정비로 보냅니다 (available → maintenance)."""
    car = unwrap(await car_service.send_to_maintenance(db, car_id))
    await db.commit()
    return car_service.to_response(car)


@router.post("/cars/{car_id}/maintenance/return", response_model=CarResponse)
async def return_from_maintenance(
    car_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CarResponse:
    """정비를 마치고 차량을 복귀시킵니다 (maintenance → available)."""
    car = unwrap(await car_service.return_from_maintenance(db, car_id))
    await db.commit()
    return car_service.to_response(car)


@router.post("/cars/{car_id}/retire", response_model=CarResponse)
async def retire_car(
    car_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CarResponse:
    """차량을 폐차 처리합니다."""
    car = unwrap(await car_service.retire(db, car_id))
    await db.commit()
    return car_service.to_response(car)
