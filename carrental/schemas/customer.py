"""고객 관련 Pydantic 요청/응답 스키마 정의.

Customer Pydantic request/response schema definitions.
"""

from datetime import datetime

from pydantic import BaseModel


class CustomerCreate(BaseModel):
    """고객 등록 요청 스키마.

    Customer creation request schema.

    Attributes:
        first_name: 이름 (First name, required)
        last_name: 성 (Last name, required)
        email: 이메일 (Email, unique, stored lowercased)
        phone: 연락처 (Phone, optional)
    """

    first_name: str
    last_name: str
    email: str
    phone: str | None = None


class CustomerResponse(BaseModel):
    """고객 응답 스키마 (Customer response schema)."""

    id: str  # 고객 UUID 문자열 (Customer UUID as string)
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    is_blocked: bool
    created_at: datetime
