"""
Seat Allocation Domain

Pure ticket-to-seat assignment logic shared by the selection preview and the
booking submission. No infrastructure access.

Policy: every newly selected seat gets the highest-priced ticket type that
still has unassigned tickets; equal prices fall back to the configured order of
the ticket lines. Identical inputs always yield identical assignments.
"""

from collections.abc import Collection, Iterable

import attrs

from src.platform.exception.exceptions import (
    DomainError,
    DuplicateSeatError,
    SeatUnavailableError,
    TicketCountExceededError,
)
from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.domain.value_object import SeatAssignment, SeatId, TicketLine


def _unique_ticket_types(
    instance: 'SeatSelection', attribute: attrs.Attribute, value: list[TicketLine]
) -> None:
    ticket_types = [line.ticket_type for line in value]
    if len(ticket_types) != len(set(ticket_types)):
        raise DomainError('Each ticket type may appear only once')


@attrs.define
class SeatSelection:
    ticket_lines: list[TicketLine] = attrs.field(
        factory=list, converter=list, validator=_unique_ticket_types
    )
    assignments: list[SeatAssignment] = attrs.field(factory=list)

    @property
    def required_seat_count(self) -> int:
        return sum(line.count for line in self.ticket_lines)

    @property
    def total_price(self) -> int:
        return sum(assignment.price for assignment in self.assignments)

    @property
    def is_complete(self) -> bool:
        return 0 < self.required_seat_count == len(self.assignments)

    @property
    def seat_ids(self) -> list[SeatId]:
        return [assignment.seat_id for assignment in self.assignments]

    def is_selected(self, seat_id: SeatId) -> bool:
        return any(assignment.seat_id == seat_id for assignment in self.assignments)

    def assigned_count(self, ticket_type: str) -> int:
        return sum(1 for assignment in self.assignments if assignment.ticket_type == ticket_type)

    def next_ticket_line(self) -> TicketLine | None:
        # sorted() is stable: equal prices keep the configured line order
        for line in sorted(self.ticket_lines, key=lambda item: -item.unit_price):
            if self.assigned_count(line.ticket_type) < line.count:
                return line
        return None

    @Logger.io
    def assign(
        self, seat_id: SeatId, *, taken_seats: Collection[SeatId] = frozenset()
    ) -> SeatAssignment:
        """
        Bind a not-yet-selected seat to the next ticket type.

        Raises:
            SeatUnavailableError: seat belongs to another booking
            TicketCountExceededError: every ticket already has a seat
        """
        if self.is_selected(seat_id):
            raise DuplicateSeatError([str(seat_id)])
        if seat_id in taken_seats:
            raise SeatUnavailableError(str(seat_id))
        if len(self.assignments) >= self.required_seat_count:
            raise TicketCountExceededError(self.required_seat_count)

        line = self.next_ticket_line()
        if line is None:
            raise TicketCountExceededError(self.required_seat_count)

        assignment = SeatAssignment(
            seat_id=seat_id, ticket_type=line.ticket_type, price=line.unit_price
        )
        self.assignments.append(assignment)
        return assignment

    def toggle(
        self, seat_id: SeatId, *, taken_seats: Collection[SeatId] = frozenset()
    ) -> SeatAssignment | None:
        """Deselect the seat if selected (returns None), otherwise assign it."""
        if self.is_selected(seat_id):
            self.assignments = [a for a in self.assignments if a.seat_id != seat_id]
            return None
        return self.assign(seat_id, taken_seats=taken_seats)

    def toggle_all(
        self, seat_ids: Iterable[SeatId], *, taken_seats: Collection[SeatId] = frozenset()
    ) -> None:
        for seat_id in seat_ids:
            self.toggle(seat_id, taken_seats=taken_seats)

    def set_ticket_count(self, ticket_type: str, count: int) -> None:
        for index, line in enumerate(self.ticket_lines):
            if line.ticket_type == ticket_type:
                self.ticket_lines[index] = attrs.evolve(line, count=count)
                return
        raise DomainError(f'Unknown ticket type: {ticket_type}')

    def reset(self) -> None:
        self.ticket_lines = [attrs.evolve(line, count=0) for line in self.ticket_lines]
        self.assignments = []
