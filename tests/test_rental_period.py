"""대여 기간 값 객체 테스트.

RentalPeriod tests: validation, half-open overlap and billable days.
"""

from datetime import datetime, timedelta, timezone

from carrental.domain.period import RentalPeriod
from carrental.domain.result import ErrorKind
from tests.conftest import at


def period(start: datetime, end: datetime) -> RentalPeriod:
    return RentalPeriod.create(start, end).value


class TestCreate:
    """기간 생성 검증."""

    def test_valid_period(self):
        """start < end 이면 성공."""
        result = RentalPeriod.create(at(1, 10), at(1, 12))
        assert result.is_success
        assert result.value.start == at(1, 10)
        assert result.value.end == at(1, 12)

    def test_equal_bounds_rejected(self):
        """start == end 이면 InvalidPeriod."""
        result = RentalPeriod.create(at(1, 10), at(1, 10))
        assert result.is_failure
        assert result.error.kind is ErrorKind.INVALID_PERIOD

    def test_reversed_bounds_rejected(self):
        """start > end 이면 InvalidPeriod."""
        result = RentalPeriod.create(at(1, 12), at(1, 10))
        assert result.is_failure
        assert result.error.code == "reservation.invalid_period"

    def test_naive_datetimes_are_utc(self):
        """naive datetime은 UTC로 간주."""
        result = RentalPeriod.create(datetime(2030, 1, 1, 10), datetime(2030, 1, 1, 12))
        assert result.value.start == at(1, 10)
        assert result.value.start.tzinfo is timezone.utc

    def test_offsets_are_normalized(self):
        """다른 오프셋은 UTC로 변환 후 비교."""
        kst = timezone(timedelta(hours=9))
        result = RentalPeriod.create(datetime(2030, 1, 1, 19, tzinfo=kst), at(1, 12))
        assert result.is_success
        assert result.value.start == at(1, 10)


class TestOverlap:
    """반개구간 겹침 판정."""

    def test_partial_overlap(self):
        """[10,12)와 [11,13)은 겹침."""
        assert period(at(1, 10), at(1, 12)).overlaps(period(at(1, 11), at(1, 13)))

    def test_overlap_is_symmetric(self):
        a = period(at(1, 10), at(1, 12))
        b = period(at(1, 11), at(1, 13))
        assert a.overlaps(b) == b.overlaps(a)

    def test_period_overlaps_itself(self):
        a = period(at(1, 10), at(1, 12))
        assert a.overlaps(a)

    def test_touching_periods_do_not_overlap(self):
        """끝과 시작이 맞닿으면 겹치지 않음."""
        a = period(at(1, 10), at(1, 12))
        b = period(at(1, 12), at(1, 14))
        assert not a.overlaps(b)
        assert not b.overlaps(a)

    def test_containment_overlaps(self):
        outer = period(at(1, 8), at(1, 20))
        inner = period(at(1, 10), at(1, 12))
        assert outer.overlaps(inner)
        assert inner.overlaps(outer)


class TestBillableDays:
    """과금 일수 계산."""

    def test_short_period_is_one_day(self):
        assert period(at(1, 10), at(1, 12)).billable_days == 1

    def test_exact_day(self):
        assert period(at(1, 10), at(2, 10)).billable_days == 1

    def test_started_day_counts(self):
        """24시간을 넘기면 다음 날로 과금."""
        assert period(at(1, 10), at(2, 11)).billable_days == 2

    def test_duration(self):
        assert period(at(1, 10), at(3, 10)).duration == timedelta(days=2)
