import pytest

from src.platform.exception.exceptions import (
    DuplicateSeatError,
    EmptySelectionError,
    InvalidTransitionError,
)
from src.service.cinema_booking.domain.booking_reference import generate_booking_reference
from src.service.cinema_booking.domain.entity.booking_entity import Booking, BookingStatus
from src.service.cinema_booking.domain.value_object import SeatAssignment, SeatId
from test.cinema_test_data import adult_seats


def _booking(status: BookingStatus = BookingStatus.CONFIRMED) -> Booking:
    return Booking.create(
        user_id=1,
        showtime_id=1,
        seat_selection=adult_seats('C1', 'C2'),
        booking_reference='CTTEST0001',
        status=status,
    )


@pytest.mark.unit
class TestBookingCreate:
    def test_total_is_sum_of_seat_prices(self) -> None:
        booking = Booking.create(
            user_id=1,
            showtime_id=1,
            seat_selection=adult_seats('A1', 'A2')
            + [SeatAssignment(seat_id=SeatId.parse('A3'), ticket_type='Child', price=999)],
            booking_reference='CTTEST0001',
        )

        assert booking.total_amount == 3997
        assert booking.total_amount == sum(seat.price for seat in booking.seats)
        assert len(booking.seats) == 3
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.created_at is not None and booking.created_at.tzinfo is not None

    def test_empty_selection_rejected(self) -> None:
        with pytest.raises(EmptySelectionError):
            Booking.create(
                user_id=1, showtime_id=1, seat_selection=[], booking_reference='CTTEST0001'
            )

    def test_duplicate_seats_rejected(self) -> None:
        with pytest.raises(DuplicateSeatError) as exc_info:
            Booking.create(
                user_id=1,
                showtime_id=1,
                seat_selection=adult_seats('A1', 'A2', 'A1'),
                booking_reference='CTTEST0001',
            )

        assert exc_info.value.seats == ['A1']


@pytest.mark.unit
class TestStatusTransitions:
    @pytest.mark.parametrize(
        'from_status,to_status',
        [
            (BookingStatus.PENDING, BookingStatus.CONFIRMED),
            (BookingStatus.PENDING, BookingStatus.CANCELLED),
            (BookingStatus.CONFIRMED, BookingStatus.CANCELLED),
        ],
    )
    def test_allowed(self, from_status: BookingStatus, to_status: BookingStatus) -> None:
        booking = _booking(from_status)

        updated = booking.transition_to(to_status)

        assert updated.status == to_status
        assert booking.status == from_status

    @pytest.mark.parametrize(
        'from_status,to_status',
        [
            (BookingStatus.CANCELLED, BookingStatus.CONFIRMED),
            (BookingStatus.CANCELLED, BookingStatus.PENDING),
            (BookingStatus.CANCELLED, BookingStatus.CANCELLED),
            (BookingStatus.CONFIRMED, BookingStatus.PENDING),
            (BookingStatus.CONFIRMED, BookingStatus.CONFIRMED),
            (BookingStatus.PENDING, BookingStatus.PENDING),
        ],
    )
    def test_rejected(self, from_status: BookingStatus, to_status: BookingStatus) -> None:
        booking = _booking(from_status)

        with pytest.raises(InvalidTransitionError) as exc_info:
            booking.transition_to(to_status)

        assert exc_info.value.from_status == from_status.value
        assert exc_info.value.to_status == to_status.value
        assert booking.status == from_status

    def test_cancelled_booking_is_not_active(self) -> None:
        assert _booking().is_active
        assert not _booking().cancel().is_active


@pytest.mark.unit
def test_booking_reference_format() -> None:
    reference = generate_booking_reference(prefix='CT', length=8)

    assert reference.startswith('CT')
    assert len(reference) == 10
    assert reference[2:].isalnum() and reference[2:].upper() == reference[2:]
