"""대여 기간 값 객체.

RentalPeriod value object: a validated, immutable half-open interval
``[start, end)``. Touching periods (one ends exactly when the other
starts) do not overlap, so back-to-back bookings of the same car are
allowed.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from carrental.domain.errors import ReservationErrors
from carrental.domain.result import Result

_DAY_SECONDS: int = 24 * 60 * 60


def as_utc(value: datetime) -> datetime:
    """naive datetime은 UTC로 간주하고, aware datetime은 UTC로 변환합니다.

    Treat naive datetimes as UTC and convert aware ones to UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class RentalPeriod:
    """반개구간 대여 기간 [start, end).

    Half-open rental period. Build it with ``RentalPeriod.create``;
    the constructor itself does not validate.

    Attributes:
        start: 시작 시각, 포함 (Inclusive start, UTC)
        end: 종료 시각, 미포함 (Exclusive end, UTC)
    """

    start: datetime
    end: datetime

    @classmethod
    def create(cls, start: datetime, end: datetime) -> Result["RentalPeriod"]:
        """기간을 검증하여 생성합니다 (start < end).

        Validate and build a period. Fails with ``InvalidPeriod`` when
        ``start >= end``.
        """
        start, end = as_utc(start), as_utc(end)
        if start >= end:
            return Result.fail(ReservationErrors.INVALID_PERIOD)
        return Result.ok(cls(start=start, end=end))

    def overlaps(self, other: "RentalPeriod") -> bool:
        """두 반개구간이 겹치는지 확인합니다 (Half-open intersection test)."""
        return self.start < other.end and other.start < self.end

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def billable_days(self) -> int:
        """과금 일수: 시작된 24시간마다 1일, 최소 1일.

        Every started 24 hours counts as a full day; at least one day.
        """
        days: int = math.ceil(self.duration.total_seconds() / _DAY_SECONDS)
        return max(1, days)
