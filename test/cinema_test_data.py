"""Shared catalog data and helpers for booking tests."""

from datetime import datetime, timedelta, timezone

from src.service.cinema_booking.domain.entity.showtime_entity import Screen, Showtime
from src.service.cinema_booking.domain.value_object import SeatAssignment, SeatId, SeatLayout
from src.service.cinema_booking.driven_adapter.repo.in_memory.in_memory_store import (
    InMemoryStore,
)


MOVIE_ID = 7
SCREEN_ID = 1
SHOWTIME_ID = 1
NEXT_DAY_SHOWTIME_ID = 2
OTHER_MOVIE_SHOWTIME_ID = 3
UNKNOWN_SCREEN_SHOWTIME_ID = 4
MISSING_SHOWTIME_ID = 999
SHOWTIME_PRICE = 1499
SHOWTIME_START = datetime(2025, 6, 1, 19, 30, tzinfo=timezone.utc)

TEST_USER_ID = 1
ANOTHER_USER_ID = 2
ADMIN_USER_ID = 100


def seed_catalog(store: InMemoryStore) -> None:
    """Screen 1 is 10 rows (A-J) x 12 seats; showtime 4 points at an unknown screen."""
    store.add_screen(
        Screen(
            id=SCREEN_ID,
            cinema_id=1,
            name='Screen 1',
            seat_layout=SeatLayout(rows=10, seats_per_row=12, row_labels='ABCDEFGHIJ'),
        )
    )
    for showtime_id, movie_id, screen_id, start in (
        (SHOWTIME_ID, MOVIE_ID, SCREEN_ID, SHOWTIME_START),
        (NEXT_DAY_SHOWTIME_ID, MOVIE_ID, SCREEN_ID, SHOWTIME_START + timedelta(days=1)),
        (OTHER_MOVIE_SHOWTIME_ID, MOVIE_ID + 1, SCREEN_ID, SHOWTIME_START),
        (UNKNOWN_SCREEN_SHOWTIME_ID, MOVIE_ID + 2, 99, SHOWTIME_START),
    ):
        store.add_showtime(
            Showtime(
                id=showtime_id,
                movie_id=movie_id,
                screen_id=screen_id,
                start_time=start,
                end_time=start + timedelta(hours=2, minutes=15),
                price=SHOWTIME_PRICE,
            )
        )


def adult_seats(*seat_ids: str, price: int = 1499) -> list[SeatAssignment]:
    return [
        SeatAssignment(seat_id=SeatId.parse(seat_id), ticket_type='Adult', price=price)
        for seat_id in seat_ids
    ]


def auth_headers(user_id: int, role: str = 'user') -> dict[str, str]:
    return {'X-User-Id': str(user_id), 'X-User-Role': role}
