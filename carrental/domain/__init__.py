"""도메인 패키지: 예약/대여 핵심 규칙.

Domain package: the booking core. Pure Python, no I/O:
    period: RentalPeriod 값 객체 (half-open interval)
    policies: ReservationConflictPolicy (capacity verdict)
    reservation: Reservation 애그리거트 + 상태 머신
    rental: Rental 애그리거트 (pickup/return)
    pricing: 등급별 가격 견적 (category pricing)
    result / errors / enums: 공용 타입 (shared types)
"""
