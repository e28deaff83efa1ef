"""예약 충돌 정책.

Reservation conflict policy. Decides whether a reservation may be
confirmed (or keep its new period) from two counts supplied by
collaborators: the category capacity and the number of confirmed
reservations overlapping the period.

The two reads are plain point-in-time queries without locking. Two
concurrent confirmations for the same category and period can both see
free capacity and both succeed; callers that need exact-once capacity
guarantees must serialize confirmations per category themselves.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from carrental.domain.enums import CarCategory, ReservationConflict
from carrental.domain.errors import ReservationErrors
from carrental.domain.period import RentalPeriod
from carrental.domain.result import DomainError


class CarCapacitySource(Protocol):
    """등급별 차량 용량 조회 (Capacity count per category)."""

    async def count_cars_in_category(self, category: CarCategory) -> int: ...


class ConfirmedOverlapSource(Protocol):
    """기간이 겹치는 확정 예약 수 조회 (Overlapping confirmed reservation count)."""

    async def count_confirmed_overlapping(
        self,
        category: CarCategory,
        start: datetime,
        end: datetime,
        exclude_reservation_id: UUID | None,
    ) -> int: ...


class ReservationConflictPolicy:
    """용량 기반 예약 충돌 판정.

    Capacity-based conflict verdict. Stateless apart from its two
    collaborators; safe to call any number of times.

    Attributes:
        _capacity: 등급별 차량 수 조회자 (Capacity source)
        _overlaps: 겹치는 확정 예약 수 조회자 (Overlap source)
    """

    def __init__(
        self,
        capacity_source: CarCapacitySource,
        overlap_source: ConfirmedOverlapSource,
    ) -> None:
        self._capacity: CarCapacitySource = capacity_source
        self._overlaps: ConfirmedOverlapSource = overlap_source

    async def check(
        self,
        category: CarCategory,
        period: RentalPeriod,
        exclude_reservation_id: UUID | None = None,
    ) -> ReservationConflict:
        """충돌 여부를 판정합니다.

        Compute the verdict for ``category`` over ``period``.

        Capacity is read first; when the category has no fleet at all the
        overlap count is never queried. The reservation being confirmed or
        modified is excluded so it does not count against itself.

        Args:
            category: 차량 등급 (Car category)
            period: 요청 기간 (Requested period)
            exclude_reservation_id: 계산에서 제외할 예약 ID (Reservation to ignore)

        Returns:
            ReservationConflict: NONE, NO_CATEGORY_CAPACITY 또는 OVER_CAPACITY
        """
        capacity: int = await self._capacity.count_cars_in_category(category)
        if capacity <= 0:
            return ReservationConflict.NO_CATEGORY_CAPACITY

        overlapping: int = await self._overlaps.count_confirmed_overlapping(
            category, period.start, period.end, exclude_reservation_id
        )
        if overlapping >= capacity:
            return ReservationConflict.OVER_CAPACITY
        return ReservationConflict.NONE


def map_conflict(conflict: ReservationConflict) -> DomainError:
    """충돌 판정을 도메인 오류로 변환합니다 (NONE이면 호출 금지).

    Map a non-none verdict to its domain error.

    Raises:
        ValueError: ``ReservationConflict.NONE``으로 호출한 경우
    """
    if conflict is ReservationConflict.NO_CATEGORY_CAPACITY:
        return ReservationErrors.NO_CATEGORY_CAPACITY
    if conflict is ReservationConflict.OVER_CAPACITY:
        return ReservationErrors.OVER_CAPACITY
    raise ValueError("map_conflict called without a conflict")
