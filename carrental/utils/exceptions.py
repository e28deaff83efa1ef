"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Services return domain ``Result`` values; routers turn a failed result
into one of these HTTPException subclasses with ``unwrap``.

Usage:
    from carrental.utils.exceptions import unwrap
    reservation = unwrap(await reservation_service.confirm(db, reservation_id))
"""

from typing import Any, TypeVar

from fastapi import HTTPException, status

from carrental.domain.result import DomainError, ErrorKind, Result
from carrental.schemas.common import ErrorResponse

T = TypeVar("T")


def _detail(error: DomainError) -> dict[str, Any]:
    return ErrorResponse(code=error.code, title=error.title, message=error.message).model_dump()


class NotFoundError(HTTPException):
    """404 Not Found 예외: 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (car, customer, reservation, rental) does not exist.

    Args:
        detail: 오류 본문 (Error body, default: "Resource not found")
    """

    def __init__(self, detail: Any = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외: 중복 또는 용량 충돌 시 사용.

    409 Conflict exception.
    Raised for uniqueness violations (license plate, email) and for
    reservation capacity conflicts.

    Args:
        detail: 오류 본문 (Error body, default: "Resource already exists")
    """

    def __init__(self, detail: Any = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외: 비즈니스 규칙 위반 시 사용.

    400 Bad Request exception.
    Raised when the request is well-formed but breaks a business rule
    (invalid period, invalid state transition, invalid readings).

    Args:
        detail: 오류 본문 (Error body, default: "Bad request")
    """

    def __init__(self, detail: Any = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def to_http_exception(error: DomainError) -> HTTPException:
    """도메인 오류를 HTTP 예외로 변환합니다.

    Map a domain error to its HTTP exception: NOT_FOUND → 404,
    CONFLICT → 409, every other kind → 400. The body carries the error
    code, title and message.
    """
    if error.kind is ErrorKind.NOT_FOUND:
        return NotFoundError(_detail(error))
    if error.kind is ErrorKind.CONFLICT:
        return DuplicateError(_detail(error))
    return BadRequestError(_detail(error))


def unwrap(result: Result[T]) -> T:
    """성공 값을 꺼내거나 실패를 HTTP 예외로 발생시킵니다.

    Return the success value or raise the mapped HTTP exception.

    Raises:
        HTTPException: 실패한 결과인 경우 (The result is a failure)
    """
    if result.is_failure:
        raise to_http_exception(result.error)
    return result.value
