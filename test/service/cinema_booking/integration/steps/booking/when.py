from typing import Any

from fastapi.testclient import TestClient
from pytest_bdd import given, parsers, when

from test.cinema_test_data import ADMIN_USER_ID, auth_headers
from test.service.cinema_booking.integration.steps.booking.booking_step_utils import (
    submit_booking,
)


@when(parsers.parse('user {user_id:d} books seats "{seats}" for showtime {showtime_id:d}'))
def when_user_books(
    client: TestClient, context: dict[str, Any], user_id: int, seats: str, showtime_id: int
) -> None:
    submit_booking(client, context, user_id=user_id, seats=seats, showtime_id=showtime_id)


@given(parsers.parse('user {user_id:d} cancels the booking'))
@when(parsers.parse('user {user_id:d} cancels the booking'))
def when_user_cancels(client: TestClient, context: dict[str, Any], user_id: int) -> None:
    booking_id = context['booking']['id']
    context['response'] = client.patch(
        f'/api/booking/{booking_id}', headers=auth_headers(user_id)
    )


@when(parsers.parse('an admin sets the booking status to "{new_status}"'))
def when_admin_sets_status(client: TestClient, context: dict[str, Any], new_status: str) -> None:
    booking_id = context['booking']['id']
    context['response'] = client.put(
        f'/api/admin/booking/{booking_id}/status',
        json={'status': new_status},
        headers=auth_headers(ADMIN_USER_ID, role='admin'),
    )
