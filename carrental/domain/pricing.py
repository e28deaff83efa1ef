"""차량 등급별 가격 정책.

Pricing policy per car category: a base price per day and a discount
tier by number of billable days.
"""

from dataclasses import dataclass
from decimal import Decimal

from carrental.domain.enums import CarCategory
from carrental.domain.period import RentalPeriod

# 등급별 일일 기본 요금: Base price per day by category
BASE_PRICE_PER_DAY: dict[CarCategory, Decimal] = {
    CarCategory.ECONOMY: Decimal("39"),
    CarCategory.COMPACT: Decimal("49"),
    CarCategory.MIDSIZE: Decimal("59"),
    CarCategory.SUV: Decimal("79"),
}

# 일수별 할인율 (최소 일수, 할인 %): highest matching tier wins
DISCOUNT_TIERS: tuple[tuple[int, int], ...] = ((30, 20), (14, 15), (7, 10), (3, 5))


@dataclass(frozen=True)
class PricingQuote:
    """가격 견적 (Price quote)."""

    price_per_day: Decimal
    days: int
    discount_percent: int
    total: Decimal


def discount_percent(days: int) -> int:
    for min_days, pct in DISCOUNT_TIERS:
        if days >= min_days:
            return pct
    return 0


def quote(category: CarCategory, period: RentalPeriod) -> PricingQuote:
    """기간과 등급으로 견적을 계산합니다.

    Compute a quote: per-day price x billable days, minus the tier discount.
    """
    per_day: Decimal = BASE_PRICE_PER_DAY[category]
    days: int = period.billable_days
    pct: int = discount_percent(days)
    total: Decimal = (per_day * days * (100 - pct) / Decimal(100)).quantize(Decimal("0.01"))
    return PricingQuote(price_per_day=per_day, days=days, discount_percent=pct, total=total)
