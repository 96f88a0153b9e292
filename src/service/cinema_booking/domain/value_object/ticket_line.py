import attrs

from src.platform.exception.exceptions import DomainError
from src.service.cinema_booking.domain.value_object.seat_id import SeatId


def _non_negative(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise DomainError(f'{attribute.name} must not be negative, got {value}')


@attrs.frozen
class TicketLine:
    """How many tickets of one type (and at which unit price) the user wants."""

    ticket_type: str
    unit_price: int = attrs.field(validator=_non_negative)  # minor currency units
    count: int = attrs.field(default=0, validator=_non_negative)


@attrs.frozen
class SeatAssignment:
    """One seat of a selection bound to a ticket type and its unit price."""

    seat_id: SeatId
    ticket_type: str
    price: int = attrs.field(validator=_non_negative)


DEFAULT_TICKET_LINES: tuple[TicketLine, ...] = (
    TicketLine(ticket_type='Adult', unit_price=1499),
    TicketLine(ticket_type='Child', unit_price=999),
    TicketLine(ticket_type='Senior', unit_price=1299),
    TicketLine(ticket_type='Student', unit_price=1199),
)
