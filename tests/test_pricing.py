"""가격 견적 테스트.

Pricing quote tests: base price per category and day-based discount tiers.
"""

from decimal import Decimal

from carrental.domain.enums import CarCategory
from carrental.domain.period import RentalPeriod
from carrental.domain.pricing import discount_percent, quote
from tests.conftest import at


class TestDiscountTiers:
    """일수별 할인율."""

    def test_tiers(self):
        assert discount_percent(1) == 0
        assert discount_percent(2) == 0
        assert discount_percent(3) == 5
        assert discount_percent(6) == 5
        assert discount_percent(7) == 10
        assert discount_percent(13) == 10
        assert discount_percent(14) == 15
        assert discount_percent(29) == 15
        assert discount_percent(30) == 20
        assert discount_percent(90) == 20


class TestQuote:
    """견적 계산."""

    def test_two_days_economy(self):
        q = quote(CarCategory.ECONOMY, RentalPeriod.create(at(1, 10), at(3, 10)).value)
        assert q.days == 2
        assert q.discount_percent == 0
        assert q.total == Decimal("78.00")

    def test_three_days_compact(self):
        q = quote(CarCategory.COMPACT, RentalPeriod.create(at(1, 10), at(4, 10)).value)
        assert q.discount_percent == 5
        assert q.total == Decimal("139.65")

    def test_week_suv(self):
        q = quote(CarCategory.SUV, RentalPeriod.create(at(1, 10), at(8, 10)).value)
        assert q.days == 7
        assert q.total == Decimal("497.70")

    def test_two_weeks_midsize(self):
        q = quote(CarCategory.MIDSIZE, RentalPeriod.create(at(1, 10), at(15, 10)).value)
        assert q.discount_percent == 15
        assert q.total == Decimal("702.10")

    def test_month_economy(self):
        q = quote(CarCategory.ECONOMY, RentalPeriod.create(at(1, 10), at(31, 10)).value)
        assert q.days == 30
        assert q.total == Decimal("936.00")

    def test_partial_day_is_billed(self):
        """25시간은 2일로 과금."""
        q = quote(CarCategory.SUV, RentalPeriod.create(at(1, 10), at(2, 11)).value)
        assert q.days == 2
        assert q.price_per_day == Decimal("79")
        assert q.total == Decimal("158.00")
