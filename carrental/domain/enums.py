"""도메인 열거형 정의.

Domain enumerations shared by the booking core, the ORM models and the
API schemas. Values are lowercase strings so they can be stored in
plain String columns and serialized as-is in JSON.
"""

from enum import Enum, IntEnum, IntFlag


class CarCategory(str, Enum):
    """차량 등급: 용량 계산과 충돌 검사의 기준.

    Fleet classification used for capacity counting and conflict checks.
    """

    ECONOMY = "economy"
    COMPACT = "compact"
    MIDSIZE = "midsize"
    SUV = "suv"


class CarStatus(str, Enum):
    """차량 상태 (Car status)."""

    AVAILABLE = "available"  # 대여 가능 (Can be picked up)
    RENTED = "rented"  # 대여 중 (Currently out on a rental)
    MAINTENANCE = "maintenance"  # 정비 중 (Not rentable, not counted as capacity)
    RETIRED = "retired"  # 폐차 (Final state)


# 용량 계산에 포함되는 차량 상태: Car statuses that count toward category capacity
CAPACITY_STATUSES: frozenset[CarStatus] = frozenset({CarStatus.AVAILABLE, CarStatus.RENTED})


class ReservationStatus(str, Enum):
    """예약 상태 (Reservation status)."""

    DRAFT = "draft"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class ReservationConflict(str, Enum):
    """충돌 검사 판정: 저장하지 않고 매번 다시 계산합니다.

    Three-valued verdict of a conflict check. Never persisted or cached.
    """

    NONE = "none"
    NO_CATEGORY_CAPACITY = "no_category_capacity"  # 해당 등급 차량 0대 (No cars in the category)
    OVER_CAPACITY = "over_capacity"  # 기간 내 확정 예약이 용량 이상 (All cars booked in the period)


class RentalStatus(str, Enum):
    """대여 상태: 반납 기록 유무로부터 파생 (Derived from the return record)."""

    ACTIVE = "active"
    COMPLETED = "completed"


class FuelLevel(IntEnum):
    """계약상 연료 수준: 5단계 서열 척도, 물리량 아님.

    Contractual fuel level at pickup/return. A 5-point ordinal scale,
    not a physical measurement: no interpolation, no unit conversion.
    """

    EMPTY = 0
    QUARTER = 1
    HALF = 2
    THREE_QUARTERS = 3
    FULL = 4


class AdminRights(IntFlag):
    """직원 관리자 권한 비트마스크.

    Employee admin rights. Flags combine bitwise, e.g.
    ``AdminRights.MANAGE_FLEET | AdminRights.MANAGE_RESERVATIONS``.
    Setting rights always replaces the whole mask.
    """

    NONE = 0
    VIEW_REPORTS = 1
    MANAGE_FLEET = 2
    MANAGE_RESERVATIONS = 4
    MANAGE_RENTALS = 8
    MANAGE_USERS = 16


# 정의된 모든 권한 비트: every defined admin right bit
ALL_ADMIN_RIGHTS: int = int(
    AdminRights.VIEW_REPORTS
    | AdminRights.MANAGE_FLEET
    | AdminRights.MANAGE_RESERVATIONS
    | AdminRights.MANAGE_RENTALS
    | AdminRights.MANAGE_USERS
)


def parse_admin_rights(value: int) -> AdminRights | None:
    """정의되지 않은 비트가 있으면 None (None when undefined bits are set)."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    mask: int = int(value)
    if mask < 0 or mask & ~ALL_ADMIN_RIGHTS:
        return None
    return AdminRights(mask)
