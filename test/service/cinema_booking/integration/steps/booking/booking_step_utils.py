"""Helpers shared by the booking Given/When/Then steps."""

from typing import Any

from fastapi.testclient import TestClient

from test.cinema_test_data import auth_headers


def split_values(values: str) -> list[str]:
    return [value.strip() for value in values.split(',') if value.strip()]


def submit_booking(
    client: TestClient, context: dict[str, Any], *, user_id: int, seats: str, showtime_id: int
) -> Any:
    """POST a booking; seats take ticket types in the order the lines were given."""
    lines = context['ticket_lines']
    prices = {line['ticket_type']: line['unit_price'] for line in lines or []}
    ticket_types = [line['ticket_type'] for line in lines or [] for _ in range(line['count'])]

    seat_selection = []
    for index, seat_id in enumerate(split_values(seats)):
        ticket_type = ticket_types[index] if index < len(ticket_types) else 'Adult'
        seat_selection.append(
            {'seat_id': seat_id, 'ticket_type': ticket_type, 'price': prices.get(ticket_type, 1499)}
        )

    payload: dict[str, Any] = {'showtime_id': showtime_id, 'seat_selection': seat_selection}
    if lines is not None:
        payload['ticket_lines'] = lines
    response = client.post('/api/booking', json=payload, headers=auth_headers(user_id))
    context['response'] = response
    if response.status_code == 201:
        context['booking'] = response.json()
    return response
