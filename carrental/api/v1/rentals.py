"""대여 라우터: 픽업/반납 엔드포인트.

Rental Router: Pickup and return endpoints.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.database import get_db
from carrental.domain.enums import RentalStatus
from carrental.schemas.booking import RentalPickup, RentalResponse, RentalReturnRequest
from carrental.schemas.common import PaginatedResponse
from carrental.services.rental_service import rental_service
from carrental.utils.exceptions import unwrap
from carrental.utils.pagination import PageDep

router: APIRouter = APIRouter()


@router.post("/rentals/pickup", response_model=RentalResponse, status_code=201)
async def pickup(
    data: RentalPickup,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RentalResponse:
    """확정 예약으로 차량을 픽업합니다.

    Pick up a car for a confirmed reservation. Answers 201 when a rental
    is created and 200 with the existing rental on a repeated pickup.
    """
    outcome = unwrap(await rental_service.pickup(db, data))
    if outcome.created:
        await db.commit()
    else:
        response.status_code = 200
    return rental_service.to_response(outcome.rental)


@router.post("/rentals/{rental_id}/return", response_model=RentalResponse)
async def return_car(
    rental_id: UUID,
    data: RentalReturnRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RentalResponse:
    """차량을 반납하고 대여를 완료합니다."""
    rental = unwrap(await rental_service.return_car(db, rental_id, data))
    await db.commit()
    return rental_service.to_response(rental)


@router.get("/rentals", response_model=PaginatedResponse)
async def list_rentals(
    db: Annotated[AsyncSession, Depends(get_db)],
    paging: PageDep,
    customer_id: UUID | None = None,
    car_id: UUID | None = None,
    status: RentalStatus | None = None,
) -> PaginatedResponse:
    return await rental_service.list_rentals(db, customer_id, car_id, status, paging.page, paging.per_page)


@router.get("/rentals/{rental_id}", response_model=RentalResponse)
async def get_rental(
    rental_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RentalResponse:
    return rental_service.to_response(unwrap(await rental_service.get(db, rental_id)))
