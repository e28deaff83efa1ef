"""차량 관련 Pydantic 요청/응답 스키마 정의.

Fleet (car) Pydantic request/response schema definitions, including
the pricing quote.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from carrental.domain.enums import CarCategory, CarStatus


class CarCreate(BaseModel):
    """차량 등록 요청 스키마.

    Car creation request schema. Values are trimmed by the service;
    the license plate may only contain uppercase letters, digits and
    hyphens.

    Attributes:
        manufacturer: 제조사 (Manufacturer)
        model: 모델명 (Model name)
        license_plate: 번호판 (License plate, e.g. "B-CR-1234")
        category: 차량 등급 (Car category)
    """

    manufacturer: str
    model: str
    license_plate: str
    category: CarCategory


class CarResponse(BaseModel):
    """차량 응답 스키마 (Car response schema)."""

    id: str  # 차량 UUID 문자열 (Car UUID as string)
    manufacturer: str
    model: str
    license_plate: str
    category: CarCategory
    status: CarStatus
    created_at: datetime
    retired_at: datetime | None = None


class PricingQuoteResponse(BaseModel):
    """가격 견적 응답 스키마.

    Pricing quote response schema.

    Attributes:
        category: 차량 등급 (Car category)
        start: 기간 시작 (Period start)
        end: 기간 종료 (Period end)
        days: 과금 일수 (Billable days)
        price_per_day: 일일 요금 (Base price per day)
        discount_percent: 할인율 % (Discount percent)
        total: 총액 (Total price)
    """

    category: CarCategory
    start: datetime
    end: datetime
    days: int
    price_per_day: Decimal
    discount_percent: int
    total: Decimal
