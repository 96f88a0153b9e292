from typing import Any

from fastapi.testclient import TestClient
from pytest_bdd import parsers, then

from test.cinema_test_data import ADMIN_USER_ID, auth_headers
from test.service.cinema_booking.integration.steps.booking.booking_step_utils import (
    split_values,
)


@then(parsers.parse('the response status code should be {status_code:d}'))
def then_status_code(context: dict[str, Any], status_code: int) -> None:
    response = context['response']
    assert response.status_code == status_code, response.text


@then(parsers.parse('the booking total should be {total:d}'))
def then_booking_total(context: dict[str, Any], total: int) -> None:
    assert context['response'].json()['total_amount'] == total


@then(parsers.parse('the conflicting seats should be "{seats}"'))
def then_conflicting_seats(context: dict[str, Any], seats: str) -> None:
    assert context['response'].json()['seats'] == split_values(seats)


@then(parsers.parse('the taken seats for showtime {showtime_id:d} should be "{seats}"'))
def then_taken_seats(client: TestClient, showtime_id: int, seats: str) -> None:
    response = client.get(f'/api/showtime/{showtime_id}/taken_seats')
    assert response.json()['taken_seats'] == split_values(seats)


@then(parsers.parse('showtime {showtime_id:d} should have no taken seats'))
def then_no_taken_seats(client: TestClient, showtime_id: int) -> None:
    response = client.get(f'/api/showtime/{showtime_id}/taken_seats')
    assert response.json()['taken_seats'] == []


@then(parsers.parse('the booking status should be "{expected}"'))
def then_booking_status(client: TestClient, context: dict[str, Any], expected: str) -> None:
    booking_id = context['booking']['id']
    response = client.get(
        f'/api/booking/{booking_id}', headers=auth_headers(ADMIN_USER_ID, role='admin')
    )
    assert response.json()['status'] == expected
