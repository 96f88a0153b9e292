import re
from typing import Self

import attrs

from src.platform.exception.exceptions import InvalidSeatError


_SEAT_ID_PATTERN = re.compile(r'^([A-Z])([1-9][0-9]*)$')


def _validate_row(instance: 'SeatId', attribute: attrs.Attribute, value: str) -> None:
    if len(value) != 1 or not ('A' <= value <= 'Z'):
        raise InvalidSeatError(f'Seat row must be a single letter A-Z, got {value!r}')


def _validate_number(instance: 'SeatId', attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise InvalidSeatError(f'Seat number must be positive, got {value}')


@attrs.frozen(order=True)
class SeatId:
    """Row letter + seat number within a screen, written as `A1`, `J12`."""

    row: str = attrs.field(validator=_validate_row)
    number: int = attrs.field(validator=_validate_number)

    @classmethod
    def parse(cls, value: str) -> Self:
        match = _SEAT_ID_PATTERN.match(value.strip().upper())
        if not match:
            raise InvalidSeatError(
                f'Invalid seat format: {value!r}. Expected row letter + number, e.g. A1'
            )
        return cls(row=match.group(1), number=int(match.group(2)))

    def __str__(self) -> str:
        return f'{self.row}{self.number}'
