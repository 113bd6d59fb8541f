from datetime import datetime

import pytest

from backend.models.event import Event
from backend.models.registration import Registration
from backend.routes import registration_routes


@pytest.fixture
def event_id(db):
    event = Event(name='PyCon', date=datetime(2026, 5, 14, 9, 0))
    db.add(event)
    db.commit()
    return event.id


def test_register_for_event_requires_token(client, event_id) -> None:
    response = client.post(f'/events/{event_id}/register')

    assert response.status_code == 401


def test_attendee_registers_for_event(client, attendee_headers, event_id) -> None:
    response = client.post(f'/events/{event_id}/register', headers=attendee_headers)

    assert response.status_code == 201
    body = response.json()
    assert body['message'] == 'Registration successful'
    assert body['registration']['eventId'] == event_id


def test_duplicate_registration_keeps_one_row(client, attendee_headers, event_id, db) -> None:
    first = client.post(f'/events/{event_id}/register', headers=attendee_headers)
    second = client.post(f'/events/{event_id}/register', headers=attendee_headers)

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.json() == {'error': registration_routes.DUPLICATE_REGISTRATION}
    assert db.query(Registration).filter(Registration.event_id == event_id).count() == 1


def test_registration_for_unknown_event_is_rejected(client, attendee_headers, db) -> None:
    response = client.post('/events/999/register', headers=attendee_headers)

    assert response.status_code == 400
    assert db.query(Registration).count() == 0


def test_registration_with_non_numeric_event_id_is_rejected(client, attendee_headers) -> None:
    response = client.post('/events/abc/register', headers=attendee_headers)

    assert response.status_code == 400


def test_admin_lists_registrations_with_users(client, admin_headers, auth_headers, event_id) -> None:
    client.post(f'/events/{event_id}/register', headers=auth_headers('ana@example.com'))

    response = client.get(f'/events/{event_id}/registrations', headers=admin_headers)

    assert response.status_code == 200
    registrations = response.json()
    assert len(registrations) == 1
    assert registrations[0]['user']['email'] == 'ana@example.com'
    assert set(registrations[0]['user']) == {'id', 'name', 'email'}


def test_deleting_event_removes_its_registrations(client, admin_headers, attendee_headers, event_id, db) -> None:
    client.post(f'/events/{event_id}/register', headers=attendee_headers)

    response = client.delete(f'/events/{event_id}', headers=admin_headers)

    assert response.status_code == 204
    assert db.query(Registration).count() == 0
