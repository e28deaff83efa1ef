"""직원 관련 Pydantic 요청/응답 스키마 정의.

Employee Pydantic request/response schema definitions.
"""

from datetime import datetime

from pydantic import BaseModel


class EmployeeCreate(BaseModel):
    """직원 등록 요청 스키마.

    Attributes:
        first_name: 이름 (First name, required)
        last_name: 성 (Last name, required)
        email: 이메일 (Email, unique, stored lowercased)
        phone: 연락처 (Phone, optional)
        personnel_number: 사번 (Personnel number, unique)
        admin_rights: 권한 비트마스크 (AdminRights bitmask, default none)
    """

    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    personnel_number: str
    admin_rights: int = 0


class AdminRightsUpdate(BaseModel):
    """권한 변경 요청: 기존 권한을 통째로 대체 (Replaces the whole mask)."""

    admin_rights: int


class EmployeeResponse(BaseModel):
    """직원 응답 스키마 (Employee response schema)."""

    id: str
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    personnel_number: str
    admin_rights: int
    admin_right_names: list[str]  # 설정된 권한 이름 (Names of the set flags)
    is_admin: bool
    is_active: bool
    created_at: datetime
    deactivated_at: datetime | None = None
