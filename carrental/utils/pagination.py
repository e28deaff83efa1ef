"""페이지네이션 유틸리티 모듈.

Pagination utility module for list endpoints.
Provides the shared query parameter dependency so every list endpoint
validates ``page`` and ``per_page`` the same way.
"""

from typing import Annotated

from fastapi import Depends, Query
from pydantic import BaseModel


class PageParams(BaseModel):
    """페이지 요청 파라미터.

    Attributes:
        page: 현재 페이지 번호 (Current page number, 1-based)
        per_page: 페이지당 항목 수 (Items per page, 1-100)
    """

    page: int = 1
    per_page: int = 20


def page_params(
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int, Query(ge=1, le=100)] = 20,
) -> PageParams:
    """쿼리 문자열에서 페이지 파라미터를 읽습니다 (FastAPI dependency)."""
    return PageParams(page=page, per_page=per_page)


PageDep = Annotated[PageParams, Depends(page_params)]
