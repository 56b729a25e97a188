from typing import Any, Dict, Optional

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import BOOKING_CREATE, EVENT_CREATE
from test.test_constants import DEFAULT_EVENT, GUEST_EMAIL


def auth_header(token: str) -> Dict[str, str]:
    return {'Authorization': f'Bearer {token}'}


def create_event(
    client: TestClient, admin_token: str, *, overrides: Optional[Dict[str, Any]] = None
) -> str:
    """Create an event as admin and return its id."""
    response = client.post(
        EVENT_CREATE,
        json={**DEFAULT_EVENT, **(overrides or {})},
        headers=auth_header(admin_token),
    )
    assert response.status_code == 200, response.text
    return response.json()['insertedId']


def create_booking(
    client: TestClient,
    token: str,
    *,
    event_id: str,
    tickets: int = 2,
    email: str = GUEST_EMAIL,
    total_price: int = 3000,
) -> str:
    """Book tickets and return the booking id."""
    response = client.post(
        BOOKING_CREATE,
        json={'email': email, 'eventId': event_id, 'tickets': tickets, 'totalPrice': total_price},
        headers=auth_header(token),
    )
    assert response.status_code == 200, response.text
    return response.json()['insertedId']
