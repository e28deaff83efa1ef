"""도메인 결과 타입: 성공 값 또는 타입이 지정된 오류.

Domain result type: a success value or a typed domain error.
Every domain operation and every use case returns a Result instead of
raising for business-rule violations. Exceptions are left for
infrastructure failures (database unavailable, programming errors).

Usage:
    result = RentalPeriod.create(start, end)
    if result.is_failure:
        return Result.fail(result.error)
    period = result.value
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """오류 종류: 호출자가 상태 코드로 매핑하는 기준.

    Error taxonomy. The API layer maps a kind to an HTTP status; the
    domain itself stays transport-agnostic.
    """

    INVALID_PERIOD = "invalid_period"
    INVALID_STATUS_TRANSITION = "invalid_status_transition"
    INVALID_TIMESTAMP = "invalid_timestamp"
    INVALID_FUEL_LEVEL = "invalid_fuel_level"
    INVALID_KM = "invalid_km"
    INVALID_RESERVATION = "invalid_reservation"
    INVALID_CAR = "invalid_car"
    INVALID_CUSTOMER = "invalid_customer"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION = "validation"


@dataclass(frozen=True)
class DomainError:
    """도메인 오류: 종류, 고유 코드, 제목, 사람이 읽을 수 있는 메시지.

    A domain error value.

    Attributes:
        kind: 오류 종류 (Error kind used for status mapping)
        code: 안정적인 오류 코드 (Stable machine-readable code, e.g. "reservation.not_found")
        title: 짧은 제목 (Short title)
        message: 상세 메시지 (Human-readable message)
    """

    kind: ErrorKind
    code: str
    title: str
    message: str


@dataclass(frozen=True)
class Result(Generic[T]):
    """성공/실패 결과 컨테이너.

    Success/failure container. Build with ``Result.ok`` or ``Result.fail``.
    Reading ``value`` on a failure (or ``error`` on a success) is a
    programming error and raises ``ValueError``.
    """

    _value: T | None = None
    _error: DomainError | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        return cls(_value=value)

    @classmethod
    def fail(cls, error: DomainError) -> "Result[T]":
        return cls(_error=error)

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        if self._error is not None:
            raise ValueError(f"Result is a failure ({self._error.code}); it has no value")
        return self._value  # type: ignore[return-value]

    @property
    def error(self) -> DomainError:
        if self._error is None:
            raise ValueError("Result is a success; it has no error")
        return self._error


def log_if_failure(
    logger: logging.Logger,
    context: str,
    result: Result[Any],
    **args: Any,
) -> Result[Any]:
    """실패한 결과를 WARNING 레벨로 기록하고 그대로 반환합니다.

    Log a failed result once, at WARNING level, at the use-case boundary.
    Returns the result unchanged so it can be used inline in a ``return``.

    Args:
        logger: 대상 로거 (Logger to write to)
        context: 호출 위치 식별자 (Context label, e.g. "ReservationService.confirm")
        result: 검사할 결과 (Result to inspect)
        **args: 추가 컨텍스트 값 (Extra context values, e.g. reservation_id)

    Returns:
        Result: 입력 결과 그대로 (The same result)
    """
    if result.is_failure:
        err = result.error
        logger.warning(
            "%s failed code=%s title=%s message=%s args=%s",
            context,
            err.code,
            err.title,
            err.message,
            args,
        )
    return result
