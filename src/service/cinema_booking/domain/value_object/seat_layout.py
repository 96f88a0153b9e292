from typing import Any, Self

import attrs

from src.service.cinema_booking.domain.value_object.seat_id import SeatId


@attrs.frozen
class SeatLayout:
    """Fixed seat grid of a screen: `rows` x `seats_per_row`, rows labelled by `row_labels`."""

    rows: int
    seats_per_row: int
    row_labels: tuple[str, ...] = attrs.field(converter=tuple)

    @row_labels.validator
    def _check_row_labels(self, attribute: attrs.Attribute, value: tuple[str, ...]) -> None:
        if len(value) != self.rows:
            raise ValueError(f'Expected {self.rows} row labels, got {len(value)}')

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            rows=data['rows'],
            seats_per_row=data.get('seats_per_row', data.get('seatsPerRow')),
            row_labels=data.get('row_labels', data.get('rowLabels')),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'rows': self.rows,
            'seats_per_row': self.seats_per_row,
            'row_labels': list(self.row_labels),
        }

    def contains(self, seat_id: SeatId) -> bool:
        return seat_id.row in self.row_labels and 1 <= seat_id.number <= self.seats_per_row
