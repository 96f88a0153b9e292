"""
Booking API integration tests

Run the real FastAPI app (routers, DI wiring, exception handlers) against the
seeded in-memory store.
"""

from typing import Any

from fastapi import status
from fastapi.testclient import TestClient
import pytest

from test.cinema_test_data import (
    ADMIN_USER_ID,
    ANOTHER_USER_ID,
    MISSING_SHOWTIME_ID,
    MOVIE_ID,
    NEXT_DAY_SHOWTIME_ID,
    SHOWTIME_ID,
    TEST_USER_ID,
    auth_headers,
)


def _booking_payload(*seat_ids: str, **extra: Any) -> dict[str, Any]:
    return {
        'showtime_id': SHOWTIME_ID,
        'seat_selection': [
            {'seat_id': seat_id, 'ticket_type': 'Adult', 'price': 1499} for seat_id in seat_ids
        ],
        **extra,
    }


def _create_booking(client: TestClient, *seat_ids: str, user_id: int = TEST_USER_ID) -> dict:
    response = client.post(
        '/api/booking', json=_booking_payload(*seat_ids), headers=auth_headers(user_id)
    )
    assert response.status_code == status.HTTP_201_CREATED, response.text
    return response.json()


@pytest.mark.integration
class TestCreateBooking:
    def test_create_booking_computes_total(self, client: TestClient) -> None:
        payload = {
            'showtime_id': SHOWTIME_ID,
            'seat_selection': [
                {'seat_id': 'A1', 'ticket_type': 'Adult', 'price': 1499},
                {'seat_id': 'A2', 'ticket_type': 'Adult', 'price': 1499},
                {'seat_id': 'A3', 'ticket_type': 'Child', 'price': 999},
            ],
            'total_amount': 1,
            'ticket_lines': [
                {'ticket_type': 'Adult', 'unit_price': 1499, 'count': 2},
                {'ticket_type': 'Child', 'unit_price': 999, 'count': 1},
            ],
        }

        response = client.post('/api/booking', json=payload, headers=auth_headers(TEST_USER_ID))

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body['total_amount'] == 3997
        assert body['status'] == 'confirmed'
        assert body['user_id'] == TEST_USER_ID
        assert body['booking_reference'].startswith('CT')
        assert [seat['seat_id'] for seat in body['seats']] == ['A1', 'A2', 'A3']

    def test_conflict_lists_taken_seats(self, client: TestClient) -> None:
        _create_booking(client, 'B1', 'B2')

        response = client.post(
            '/api/booking',
            json=_booking_payload('B3', 'B2', 'B1'),
            headers=auth_headers(ANOTHER_USER_ID),
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()['seats'] == ['B1', 'B2']

    def test_empty_selection_rejected(self, client: TestClient) -> None:
        response = client.post(
            '/api/booking', json=_booking_payload(), headers=auth_headers(TEST_USER_ID)
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_duplicate_seats_rejected(self, client: TestClient) -> None:
        response = client.post(
            '/api/booking', json=_booking_payload('A1', 'A1'), headers=auth_headers(TEST_USER_ID)
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['seats'] == ['A1']

    def test_unknown_showtime(self, client: TestClient) -> None:
        payload = _booking_payload('A1')
        payload['showtime_id'] = MISSING_SHOWTIME_ID

        response = client.post('/api/booking', json=payload, headers=auth_headers(TEST_USER_ID))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_requires_user_header(self, client: TestClient) -> None:
        response = client.post('/api/booking', json=_booking_payload('A1'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.integration
class TestBookingLifecycle:
    def test_cancel_releases_seats(self, client: TestClient) -> None:
        booking = _create_booking(client, 'C1', 'C2')

        response = client.patch(f'/api/booking/{booking["id"]}', headers=auth_headers(TEST_USER_ID))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            'id': booking['id'],
            'status': 'cancelled',
            'released_seats': ['C1', 'C2'],
        }
        taken = client.get(f'/api/showtime/{SHOWTIME_ID}/taken_seats').json()
        assert taken['taken_seats'] == []
        _create_booking(client, 'C1', user_id=ANOTHER_USER_ID)

    def test_other_user_cannot_cancel_or_read(self, client: TestClient) -> None:
        booking = _create_booking(client, 'D1')

        cancel = client.patch(
            f'/api/booking/{booking["id"]}', headers=auth_headers(ANOTHER_USER_ID)
        )
        read = client.get(f'/api/booking/{booking["id"]}', headers=auth_headers(ANOTHER_USER_ID))

        assert cancel.status_code == status.HTTP_403_FORBIDDEN
        assert read.status_code == status.HTTP_403_FORBIDDEN

    def test_my_bookings_and_reference_lookup(self, client: TestClient) -> None:
        first = _create_booking(client, 'E1')
        second = _create_booking(client, 'E2')
        _create_booking(client, 'E3', user_id=ANOTHER_USER_ID)

        mine = client.get('/api/booking/my_booking', headers=auth_headers(TEST_USER_ID))
        by_reference = client.get(
            f'/api/booking/reference/{first["booking_reference"]}',
            headers=auth_headers(ANOTHER_USER_ID),
        )

        assert [b['id'] for b in mine.json()] == [second['id'], first['id']]
        assert by_reference.status_code == status.HTTP_200_OK
        assert by_reference.json()['id'] == first['id']


@pytest.mark.integration
class TestAdminBooking:
    def test_admin_routes_require_admin_role(self, client: TestClient) -> None:
        response = client.get('/api/admin/booking', headers=auth_headers(TEST_USER_ID))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_admin_lists_and_filters(self, client: TestClient) -> None:
        kept = _create_booking(client, 'F1')
        cancelled = _create_booking(client, 'F2', user_id=ANOTHER_USER_ID)
        client.patch(f'/api/booking/{cancelled["id"]}', headers=auth_headers(ANOTHER_USER_ID))
        admin = auth_headers(ADMIN_USER_ID, role='admin')

        everyone = client.get('/api/admin/booking', headers=admin)
        only_confirmed = client.get(
            '/api/admin/booking', params={'booking_status': 'confirmed'}, headers=admin
        )

        assert [b['id'] for b in everyone.json()] == [cancelled['id'], kept['id']]
        assert [b['id'] for b in only_confirmed.json()] == [kept['id']]

    def test_cancelled_booking_cannot_be_reconfirmed(self, client: TestClient) -> None:
        booking = _create_booking(client, 'G1')
        admin = auth_headers(ADMIN_USER_ID, role='admin')
        status_url = f"/api/admin/booking/{booking['id']}/status"
        client.put(status_url, json={'status': 'cancelled'}, headers=admin)

        response = client.put(status_url, json={'status': 'confirmed'}, headers=admin)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()['from_status'] == 'cancelled'
        read = client.get(f'/api/booking/{booking["id"]}', headers=admin)
        assert read.json()['status'] == 'cancelled'

    def test_unknown_status_is_rejected(self, client: TestClient) -> None:
        booking = _create_booking(client, 'G2')

        response = client.put(
            f'/api/admin/booking/{booking["id"]}/status',
            json={'status': 'refunded'},
            headers=auth_headers(ADMIN_USER_ID, role='admin'),
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.integration
class TestShowtimeApi:
    def test_list_by_movie_and_date(self, client: TestClient) -> None:
        all_showtimes = client.get('/api/showtime', params={'movie_id': MOVIE_ID})
        next_day = client.get('/api/showtime', params={'movie_id': MOVIE_ID, 'date': '2025-06-02'})

        assert [s['id'] for s in all_showtimes.json()] == [SHOWTIME_ID, NEXT_DAY_SHOWTIME_ID]
        assert [s['id'] for s in next_day.json()] == [NEXT_DAY_SHOWTIME_ID]
        assert all_showtimes.json()[0]['screen']['total_seats'] == 120

    def test_taken_seats(self, client: TestClient) -> None:
        _create_booking(client, 'H10', 'H9')

        response = client.get(f'/api/showtime/{SHOWTIME_ID}/taken_seats')

        assert response.json() == {'showtime_id': SHOWTIME_ID, 'taken_seats': ['H9', 'H10']}

    def test_taken_seats_unknown_showtime(self, client: TestClient) -> None:
        response = client.get(f'/api/showtime/{MISSING_SHOWTIME_ID}/taken_seats')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_preview_assigns_ticket_types(self, client: TestClient) -> None:
        response = client.post(
            f'/api/showtime/{SHOWTIME_ID}/seat_selection/preview',
            json={
                'ticket_lines': [
                    {'ticket_type': 'Child', 'unit_price': 999, 'count': 1},
                    {'ticket_type': 'Adult', 'unit_price': 1499, 'count': 1},
                ],
                'seat_ids': ['J1', 'J2'],
            },
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert [(a['seat_id'], a['ticket_type']) for a in body['assignments']] == [
            ('J1', 'Adult'),
            ('J2', 'Child'),
        ]
        assert body['total_price'] == 2498
        assert body['is_complete'] is True


@pytest.mark.integration
class TestPlatformEndpoints:
    def test_health(self, client: TestClient) -> None:
        response = client.get('/health')

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['status'] == 'healthy'

    def test_metrics_exposes_booking_counters(self, client: TestClient) -> None:
        _create_booking(client, 'I1')

        response = client.get('/metrics')

        assert response.status_code == status.HTTP_200_OK
        assert 'booking_submissions_total' in response.text
