"""v1 API 라우터 패키지: 모든 엔드포인트 통합.

v1 API Router package: Aggregates all endpoints into a single router
for inclusion in the FastAPI application under ``/api/v1``.

Included routers:
    - cars: 차량 관리 및 가격 견적 (Fleet management and pricing quote)
    - customers: 고객 관리 (Customer management)
    - employees: 직원 관리 (Staff management)
    - reservations: 예약 생명주기 (Reservation lifecycle)
    - rentals: 픽업/반납 (Pickup and return)
"""

from fastapi import APIRouter

from carrental.api.v1.cars import router as cars_router
from carrental.api.v1.customers import router as customers_router
from carrental.api.v1.employees import router as employees_router
from carrental.api.v1.reservations import router as reservations_router
from carrental.api.v1.rentals import router as rentals_router

# 통합 라우터: Aggregated v1 router
api_router: APIRouter = APIRouter()

api_router.include_router(cars_router, tags=["Cars"])
api_router.include_router(customers_router, tags=["Customers"])
api_router.include_router(employees_router, tags=["Employees"])
api_router.include_router(reservations_router, tags=["Reservations"])
api_router.include_router(rentals_router, tags=["Rentals"])
