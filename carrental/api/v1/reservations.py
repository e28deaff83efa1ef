"""예약 라우터: 예약 생명주기 엔드포인트.

Reservation Router: Endpoints for the reservation lifecycle:
create (Draft), change period, confirm, cancel and the draft expiry batch.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.database import get_db
from carrental.domain.enums import CarCategory, ReservationStatus
from carrental.schemas.booking import (
    ExpireDraftsResponse,
    ReservationCreate,
    ReservationPeriodUpdate,
    ReservationResponse,
)
from carrental.schemas.common import PaginatedResponse
from carrental.services.reservation_service import reservation_service
from carrental.utils.exceptions import unwrap
from carrental.utils.pagination import PageDep

router: APIRouter = APIRouter()


@router.post("/reservations", response_model=ReservationResponse, status_code=201)
async def create_reservation(
    data: ReservationCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ReservationResponse:
    """초안 예약을 생성합니다.

    Create a reservation in Draft.
    """
    reservation = unwrap(await reservation_service.create(db, data))
    await db.commit()
    return reservation_service.to_response(reservation)


@router.get("/reservations", response_model=PaginatedResponse)
async def list_reservations(
    db: Annotated[AsyncSession, Depends(get_db)],
    paging: PageDep,
    customer_id: UUID | None = None,
    status: ReservationStatus | None = None,
    category: CarCategory | None = None,
) -> PaginatedResponse:
    """예약 목록을 조회합니다 (고객/상태/등급 필터)."""
    return await reservation_service.list_reservations(
        db, customer_id, status, category, paging.page, paging.per_page
    )


@router.post("/reservations/expire", response_model=ExpireDraftsResponse)
async def expire_drafts(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ExpireDraftsResponse:
    """오래된 초안 예약을 일괄 만료합니다.

    Expire every Draft older than the configured draft lifetime.
    """
    expired: int = unwrap(await reservation_service.expire_drafts(db))
    await db.commit()
    return ExpireDraftsResponse(expired=expired)


@router.get("/reservations/{reservation_id}", response_model=ReservationResponse)
async def get_reservation(
    reservation_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ReservationResponse:
    return reservation_service.to_response(unwrap(await reservation_service.get(db, reservation_id)))


@router.put("/reservations/{reservation_id}/period", response_model=ReservationResponse)
async def change_period(
    reservation_id: UUID,
    data: ReservationPeriodUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ReservationResponse:
    """초안 예약의 기간을 변경합니다: 충돌 검사 포함.

    Change the period of a Draft reservation.
    """
    reservation = unwrap(await reservation_service.change_period(db, reservation_id, data))
    await db.commit()
    return reservation_service.to_response(reservation)


@router.post("/reservations/{reservation_id}/confirm", response_model=ReservationResponse)
async def confirm_reservation(
    reservation_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ReservationResponse:
    """예약을 확정합니다: 등급 용량이 없으면 409.

    Confirm a Draft reservation; capacity conflicts answer 409.
    """
    reservation = unwrap(await reservation_service.confirm(db, reservation_id))
    await db.commit()
    return reservation_service.to_response(reservation)


@router.post("/reservations/{reservation_id}/cancel", response_model=ReservationResponse)
async def cancel_reservation(
    reservation_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ReservationResponse:
    reservation = unwrap(await reservation_service.cancel(db, reservation_id))
    await db.commit()
    return reservation_service.to_response(reservation)
