"""
Unit tests for SeatSelection (ticket-to-seat allocation)

Policy: each new seat takes the highest-priced ticket type that still has
tickets left; equal prices keep the configured ticket-line order.
"""

import pytest

from src.platform.exception.exceptions import (
    DomainError,
    SeatUnavailableError,
    TicketCountExceededError,
)
from src.service.cinema_booking.domain.seat_allocation import SeatSelection
from src.service.cinema_booking.domain.value_object import SeatId, TicketLine


def _seat(value: str) -> SeatId:
    return SeatId.parse(value)


def _adult_child_selection() -> SeatSelection:
    return SeatSelection(
        ticket_lines=[
            TicketLine(ticket_type='Adult', unit_price=1499, count=2),
            TicketLine(ticket_type='Child', unit_price=999, count=1),
        ]
    )


@pytest.mark.unit
class TestAssignment:
    def test_two_adults_one_child_walkthrough(self) -> None:
        selection = _adult_child_selection()

        first = selection.toggle(_seat('A1'))
        second = selection.toggle(_seat('A2'))
        third = selection.toggle(_seat('A3'))

        assert first is not None and first.ticket_type == 'Adult' and first.price == 1499
        assert second is not None and second.ticket_type == 'Adult'
        assert third is not None and third.ticket_type == 'Child' and third.price == 999
        assert selection.total_price == 3997
        assert selection.is_complete

    def test_cheaper_line_listed_first_still_assigned_last(self) -> None:
        selection = SeatSelection(
            ticket_lines=[
                TicketLine(ticket_type='Child', unit_price=999, count=1),
                TicketLine(ticket_type='Adult', unit_price=1499, count=1),
            ]
        )

        selection.toggle_all([_seat('A1'), _seat('A2')])

        assert [a.ticket_type for a in selection.assignments] == ['Adult', 'Child']

    def test_equal_prices_follow_configured_order(self) -> None:
        selection = SeatSelection(
            ticket_lines=[
                TicketLine(ticket_type='Student', unit_price=1199, count=1),
                TicketLine(ticket_type='Member', unit_price=1199, count=1),
            ]
        )

        selection.toggle_all([_seat('A1'), _seat('A2')])

        assert [a.ticket_type for a in selection.assignments] == ['Student', 'Member']

    def test_same_state_yields_same_assignment(self) -> None:
        results = []
        for _ in range(5):
            selection = _adult_child_selection()
            selection.toggle(_seat('A1'))
            assignment = selection.toggle(_seat('B4'))
            results.append(assignment)

        assert len(set(results)) == 1

    def test_toggle_selected_seat_deselects_and_frees_ticket(self) -> None:
        selection = _adult_child_selection()
        selection.toggle_all([_seat('A1'), _seat('A2'), _seat('A3')])

        removed = selection.toggle(_seat('A1'))
        refilled = selection.toggle(_seat('A4'))

        assert removed is None
        assert refilled is not None and refilled.ticket_type == 'Adult'
        assert selection.seat_ids == [_seat('A2'), _seat('A3'), _seat('A4')]


@pytest.mark.unit
class TestRejections:
    def test_taken_seat_is_unavailable(self) -> None:
        selection = _adult_child_selection()

        with pytest.raises(SeatUnavailableError) as exc_info:
            selection.toggle(_seat('C5'), taken_seats={_seat('C5')})

        assert exc_info.value.seat == 'C5'
        assert selection.assignments == []

    def test_more_seats_than_tickets_is_exceeded(self) -> None:
        selection = _adult_child_selection()
        selection.toggle_all([_seat('A1'), _seat('A2'), _seat('A3')])

        with pytest.raises(TicketCountExceededError) as exc_info:
            selection.toggle(_seat('A4'))

        assert exc_info.value.ticket_count == 3
        assert len(selection.assignments) == 3

    def test_rejections_are_distinct_errors(self) -> None:
        assert not issubclass(SeatUnavailableError, TicketCountExceededError)
        assert not issubclass(TicketCountExceededError, SeatUnavailableError)

    def test_no_tickets_means_no_seats(self) -> None:
        selection = SeatSelection(ticket_lines=[TicketLine(ticket_type='Adult', unit_price=1499)])

        with pytest.raises(TicketCountExceededError):
            selection.toggle(_seat('A1'))

    def test_duplicate_ticket_types_rejected(self) -> None:
        with pytest.raises(DomainError):
            SeatSelection(
                ticket_lines=[
                    TicketLine(ticket_type='Adult', unit_price=1499, count=1),
                    TicketLine(ticket_type='Adult', unit_price=1299, count=1),
                ]
            )


@pytest.mark.unit
class TestTicketCounts:
    def test_set_ticket_count_updates_required_seats(self) -> None:
        selection = _adult_child_selection()

        selection.set_ticket_count('Child', 3)

        assert selection.required_seat_count == 5

    def test_set_ticket_count_unknown_type(self) -> None:
        with pytest.raises(DomainError):
            _adult_child_selection().set_ticket_count('Senior', 1)

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(DomainError):
            _adult_child_selection().set_ticket_count('Adult', -1)

    def test_reset_clears_counts_and_seats(self) -> None:
        selection = _adult_child_selection()
        selection.toggle(_seat('A1'))

        selection.reset()

        assert selection.assignments == []
        assert selection.required_seat_count == 0
        assert not selection.is_complete
