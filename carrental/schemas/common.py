"""공용 응답 스키마.

Response shapes shared by every router: the page envelope and the body
of a failed use case.
"""

from typing import Any

from pydantic import BaseModel


class PaginatedResponse(BaseModel):
    """목록 응답 봉투 (List envelope).

    Attributes:
        items: 현재 페이지 항목 (Items of the requested page)
        total: 필터와 일치하는 전체 개수 (Matches across all pages)
        page: 1부터 시작하는 페이지 번호 (1-based page number)
        per_page: 페이지 크기 (Page size)
    """

    items: list[Any]
    total: int
    page: int
    per_page: int


class ErrorResponse(BaseModel):
    """도메인 오류 응답 본문.

    Body of a failed use case, carried in ``HTTPException.detail``.

    Attributes:
        code: 오류 코드 (Stable error code, e.g. "reservation.over_capacity")
        title: 오류 제목 (Short title)
        message: 오류 메시지 (Human-readable message)
    """

    code: str
    title: str
    message: str
