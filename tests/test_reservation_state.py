"""예약 애그리거트 상태 머신 테스트.

Reservation aggregate state machine tests (pure domain, no database).
"""

import uuid
from datetime import timedelta

from carrental.domain.enums import CarCategory, ReservationStatus
from carrental.domain.reservation import CANCELLABLE_STATUSES, Reservation
from carrental.domain.result import ErrorKind
from tests.conftest import NOW, at


def draft() -> Reservation:
    return Reservation.create(
        customer_id=uuid.uuid4(),
        car_category=CarCategory.ECONOMY,
        start=at(1, 10),
        end=at(1, 12),
        created_at=NOW,
    ).value


def confirmed() -> Reservation:
    reservation = draft()
    assert reservation.confirm(NOW + timedelta(minutes=5)).is_success
    return reservation


class TestCreate:
    """예약 생성."""

    def test_starts_in_draft(self):
        reservation = draft()
        assert reservation.status is ReservationStatus.DRAFT
        assert reservation.created_at == NOW
        assert reservation.confirmed_at is None
        assert reservation.rental_id is None
        assert not reservation.is_terminal

    def test_invalid_period(self):
        result = Reservation.create(uuid.uuid4(), CarCategory.SUV, at(1, 12), at(1, 10), NOW)
        assert result.is_failure
        assert result.error.kind is ErrorKind.INVALID_PERIOD

    def test_explicit_id(self):
        reservation_id = uuid.uuid4()
        result = Reservation.create(uuid.uuid4(), CarCategory.SUV, at(1, 10), at(1, 12), NOW, reservation_id)
        assert result.value.id == reservation_id


class TestConfirm:
    """확정 전이."""

    def test_confirm_draft(self):
        reservation = draft()
        result = reservation.confirm(NOW + timedelta(hours=1))
        assert result.is_success
        assert reservation.status is ReservationStatus.CONFIRMED
        assert reservation.confirmed_at == NOW + timedelta(hours=1)

    def test_confirm_twice_fails(self):
        reservation = confirmed()
        first_confirmed_at = reservation.confirmed_at
        result = reservation.confirm(NOW + timedelta(hours=2))
        assert result.error.kind is ErrorKind.INVALID_STATUS_TRANSITION
        assert reservation.confirmed_at == first_confirmed_at

    def test_confirm_before_creation_fails(self):
        """생성 이전 시각으로 확정하면 InvalidTimestamp, 상태 유지."""
        reservation = draft()
        result = reservation.confirm(NOW - timedelta(seconds=1))
        assert result.error.kind is ErrorKind.INVALID_TIMESTAMP
        assert reservation.status is ReservationStatus.DRAFT


class TestCancel:
    """취소 전이."""

    def test_cancellable_statuses(self):
        assert CANCELLABLE_STATUSES == {ReservationStatus.DRAFT, ReservationStatus.CONFIRMED}

    def test_cancel_draft(self):
        reservation = draft()
        assert reservation.cancel(NOW + timedelta(hours=1)).is_success
        assert reservation.status is ReservationStatus.CANCELLED
        assert reservation.cancelled_at == NOW + timedelta(hours=1)
        assert reservation.is_terminal

    def test_cancel_confirmed_keeps_confirmed_at(self):
        reservation = confirmed()
        confirmed_at = reservation.confirmed_at
        assert reservation.cancel(NOW + timedelta(hours=1)).is_success
        assert reservation.confirmed_at == confirmed_at

    def test_second_cancel_fails(self):
        """재취소는 InvalidStatusTransition."""
        reservation = draft()
        reservation.cancel(NOW + timedelta(hours=1))
        result = reservation.cancel(NOW + timedelta(hours=2))
        assert result.error.kind is ErrorKind.INVALID_STATUS_TRANSITION
        assert reservation.cancelled_at == NOW + timedelta(hours=1)

    def test_cancel_rented_fails(self):
        """픽업된 예약은 취소 불가."""
        reservation = confirmed()
        reservation.mark_as_rented(uuid.uuid4())
        result = reservation.cancel(NOW + timedelta(hours=1))
        assert result.error.kind is ErrorKind.INVALID_STATUS_TRANSITION
        assert reservation.status is ReservationStatus.CONFIRMED

    def test_cancel_expired_fails(self):
        reservation = draft()
        reservation.expire(NOW + timedelta(hours=2))
        assert reservation.cancel(NOW + timedelta(hours=3)).is_failure

    def test_cancel_before_creation_fails(self):
        reservation = draft()
        result = reservation.cancel(NOW - timedelta(minutes=1))
        assert result.error.kind is ErrorKind.INVALID_TIMESTAMP
        assert reservation.status is ReservationStatus.DRAFT


class TestExpire:
    """만료 전이."""

    def test_expire_draft(self):
        reservation = draft()
        assert reservation.expire(NOW + timedelta(hours=2)).is_success
        assert reservation.status is ReservationStatus.EXPIRED
        assert reservation.expired_at == NOW + timedelta(hours=2)

    def test_expire_confirmed_fails(self):
        reservation = confirmed()
        result = reservation.expire(NOW + timedelta(hours=2))
        assert result.error.kind is ErrorKind.INVALID_STATUS_TRANSITION
        assert reservation.status is ReservationStatus.CONFIRMED

    def test_confirm_expired_fails(self):
        reservation = draft()
        reservation.expire(NOW + timedelta(hours=2))
        assert reservation.confirm(NOW + timedelta(hours=3)).is_failure


class TestChangePeriod:
    """기간 변경."""

    def test_change_draft_period(self):
        reservation = draft()
        assert reservation.change_period(at(2, 10), at(2, 12)).is_success
        assert reservation.period.start == at(2, 10)

    def test_invalid_period_leaves_period(self):
        reservation = draft()
        result = reservation.change_period(at(2, 12), at(2, 10))
        assert result.error.kind is ErrorKind.INVALID_PERIOD
        assert reservation.period.start == at(1, 10)

    def test_confirmed_period_is_immutable(self):
        reservation = confirmed()
        result = reservation.change_period(at(2, 10), at(2, 12))
        assert result.error.kind is ErrorKind.INVALID_STATUS_TRANSITION
        assert reservation.period.start == at(1, 10)


class TestMarkAsRented:
    """대여 연결."""

    def test_link_rental(self):
        reservation = confirmed()
        rental_id = uuid.uuid4()
        assert reservation.mark_as_rented(rental_id).is_success
        assert reservation.rental_id == rental_id
        assert reservation.status is ReservationStatus.CONFIRMED

    def test_same_rental_is_idempotent(self):
        reservation = confirmed()
        rental_id = uuid.uuid4()
        reservation.mark_as_rented(rental_id)
        assert reservation.mark_as_rented(rental_id).is_success
        assert reservation.rental_id == rental_id

    def test_other_rental_fails(self):
        reservation = confirmed()
        rental_id = uuid.uuid4()
        reservation.mark_as_rented(rental_id)
        result = reservation.mark_as_rented(uuid.uuid4())
        assert result.error.kind is ErrorKind.INVALID_STATUS_TRANSITION
        assert reservation.rental_id == rental_id

    def test_draft_cannot_be_rented(self):
        assert draft().mark_as_rented(uuid.uuid4()).is_failure
