from datetime import timedelta

import pytest

from reminder.core.security import TokenCodec
from reminder.models.event import Event
from reminder.models.user import User

from conftest import SECRET

MEETING = {"name": "Meeting", "date": "2025-01-15", "message": "sync"}


def test_create_then_get_round_trip(client, signup):
    headers = signup()
    r = client.post("/api/v1/event", json={"name": "X", "date": "D", "message": "M"}, headers=headers)
    assert r.status_code == 200
    assert r.json() == {"status": "created", "event_name": "X", "message": "Event created successfully"}

    r = client.get("/api/v1/event/X", headers=headers)
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "fetched"
    assert isinstance(body["event_id"], int)
    assert body["details"] == {"name": "X", "date": "D", "message": "M"}
    assert body["message"] == "Event fetched successfully"


def test_other_user_cannot_see_event(client, signup):
    alice = signup("alice")
    bob = signup("bob")
    client.post("/api/v1/event", json=MEETING, headers=alice)

    assert client.get("/api/v1/event/Meeting", headers=bob).status_code == 404
    assert client.put("/api/v1/event/Meeting", json={"date": "x"}, headers=bob).status_code == 404
    assert client.delete("/api/v1/event/Meeting", headers=bob).status_code == 404
    assert client.get("/api/v1/event/Meeting", headers=alice).json()["details"] == MEETING


def test_same_name_allowed_for_different_owners(client, signup):
    alice = signup("alice")
    bob = signup("bob")
    assert client.post("/api/v1/event", json=MEETING, headers=alice).status_code == 200
    assert client.post("/api/v1/event", json=dict(MEETING, message="bob's"), headers=bob).status_code == 200
    assert client.get("/api/v1/event/Meeting", headers=bob).json()["details"]["message"] == "bob's"


def test_duplicate_name_for_same_owner_conflicts(client, signup):
    headers = signup()
    client.post("/api/v1/event", json=MEETING, headers=headers)
    r = client.post("/api/v1/event", json=MEETING, headers=headers)
    assert r.status_code == 409
    assert r.json()["status"] == "error"


def test_create_bad_body_is_400(client, signup):
    headers = signup()
    r = client.post("/api/v1/event", json={"name": 5}, headers=headers)
    assert r.status_code == 400
    assert r.json()["status"] == "error"


def test_update_bad_body_is_400(client, signup):
    headers = signup()
    client.post("/api/v1/event", json=MEETING, headers=headers)
    r = client.put("/api/v1/event/Meeting", json={"date": 5}, headers=headers)
    assert r.status_code == 400
    assert r.json()["status"] == "error"
    assert client.get("/api/v1/event/Meeting", headers=headers).json()["details"] == MEETING


def test_update_replaces_only_non_empty_fields(client, signup):
    headers = signup()
    client.post("/api/v1/event", json=MEETING, headers=headers)

    r = client.put("/api/v1/event/Meeting", json={"date": "2025-01-16"}, headers=headers)
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "updated"
    assert body["message"] == "Event updated successfully"
    assert body["details"] == {"name": "Meeting", "date": "2025-01-16", "message": "sync"}

    r = client.put("/api/v1/event/Meeting", json={"date": "", "message": ""}, headers=headers)
    assert r.json()["details"] == {"name": "Meeting", "date": "2025-01-16", "message": "sync"}
    assert client.get("/api/v1/event/Meeting", headers=headers).json()["details"]["date"] == "2025-01-16"


def test_update_can_rename(client, signup):
    headers = signup()
    client.post("/api/v1/event", json=MEETING, headers=headers)
    original_id = client.get("/api/v1/event/Meeting", headers=headers).json()["event_id"]

    r = client.put("/api/v1/event/Meeting", json={"name": "Standup"}, headers=headers)
    assert r.status_code == 200
    assert r.json()["event_id"] == original_id

    assert client.get("/api/v1/event/Meeting", headers=headers).status_code == 404
    fetched = client.get("/api/v1/event/Standup", headers=headers).json()
    assert fetched["event_id"] == original_id
    assert fetched["details"] == {"name": "Standup", "date": "2025-01-15", "message": "sync"}


def test_rename_onto_existing_name_conflicts(client, signup):
    headers = signup()
    client.post("/api/v1/event", json=MEETING, headers=headers)
    client.post("/api/v1/event", json=dict(MEETING, name="Standup"), headers=headers)
    r = client.put("/api/v1/event/Meeting", json={"name": "Standup"}, headers=headers)
    assert r.status_code == 409


def test_update_missing_event_is_404(client, signup):
    headers = signup()
    r = client.put("/api/v1/event/Nope", json={"date": "x"}, headers=headers)
    assert r.status_code == 404
    assert r.json() == {"status": "error", "message": "Record not found"}


def test_delete_then_get_is_404(client, signup):
    headers = signup()
    client.post("/api/v1/event", json=MEETING, headers=headers)

    r = client.delete("/api/v1/event/Meeting", headers=headers)
    assert r.status_code == 200
    assert r.json() == {"status": "deleted", "event_name": "Meeting", "message": "Event deleted successfully"}

    assert client.get("/api/v1/event/Meeting", headers=headers).status_code == 404
    assert client.delete("/api/v1/event/Meeting", headers=headers).status_code == 404


def test_delete_nonexistent_is_404(client, signup):
    headers = signup()
    r = client.delete("/api/v1/event/Ghost", headers=headers)
    assert r.status_code == 404
    assert r.json()["status"] == "error"


def test_event_names_with_spaces(client, signup):
    headers = signup()
    client.post("/api/v1/event", json=dict(MEETING, name="Team lunch"), headers=headers)
    r = client.get("/api/v1/event/Team%20lunch", headers=headers)
    assert r.status_code == 200
    assert r.json()["details"]["name"] == "Team lunch"


PROTECTED = [
    ("post", "/api/v1/event", MEETING),
    ("get", "/api/v1/event/Meeting", None),
    ("put", "/api/v1/event/Meeting", {"date": "x"}),
    ("delete", "/api/v1/event/Meeting", None),
]


def _call(client, method, path, body, headers):
    if body is None:
        return client.request(method.upper(), path, headers=headers)
    return client.request(method.upper(), path, json=body, headers=headers)


@pytest.mark.parametrize("method,path,body", PROTECTED)
def test_expired_token_rejected(client, signup, method, path, body):
    signup("alice")
    expired = TokenCodec(SECRET, lifetime=timedelta(seconds=-30)).issue("alice")
    r = _call(client, method, path, body, {"Authorization": f"Bearer {expired}"})
    assert r.status_code == 401
    assert r.json()["status"] == "error"


@pytest.mark.parametrize("method,path,body", PROTECTED)
def test_missing_or_forged_token_rejected(client, signup, method, path, body):
    signup("alice")
    assert _call(client, method, path, body, {}).status_code == 401

    forged = TokenCodec("some-other-secret").issue("alice")
    r = _call(client, method, path, body, {"Authorization": f"Bearer {forged}"})
    assert r.status_code == 401

    r = _call(client, method, path, body, {"Authorization": "Basic YWxpY2U6cHc="})
    assert r.status_code == 401


def test_token_without_username_claim_resolves_to_no_identity(client, signup):
    signup("alice")
    from jose import jwt

    token = jwt.encode({"sub": "alice"}, SECRET, algorithm="HS256")
    r = client.get("/api/v1/event/Meeting", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 404


def test_removed_user_token_resolves_to_nothing_and_events_cascade(client, app, signup):
    headers = signup("alice")
    client.post("/api/v1/event", json=MEETING, headers=headers)

    db = app.state.session_factory()
    try:
        db.query(User).filter(User.username == "alice").delete(synchronize_session=False)
        db.commit()
        assert db.query(Event).count() == 0
    finally:
        db.close()

    # token is still validly signed; identity is re-resolved and finds no user
    assert client.get("/api/v1/event/Meeting", headers=headers).status_code == 404
    assert client.delete("/api/v1/event/Meeting", headers=headers).status_code == 404
    r = client.post("/api/v1/event", json=MEETING, headers=headers)
    assert r.status_code == 500
    assert r.json()["status"] == "error"
