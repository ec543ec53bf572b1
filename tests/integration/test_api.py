"""HTTP tests against the FastAPI app."""
from __future__ import annotations

import uuid

import jwt
import pytest
from fastapi.testclient import TestClient

from system_messages.api.deps import get_composer
from system_messages.app import create_app
from system_messages.config import settings
from system_messages.infrastructure.compose.url_composer import UrlSchemeComposer
from tests.conftest import SELF_ID


def _make_token(sub: int = SELF_ID, handle: str | None = "me") -> str:
    claims: dict = {"sub": str(sub)}
    if handle is not None:
        claims["handle"] = handle
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def _auth(**kwargs) -> dict[str, str]:
    return {"Authorization": f"Bearer {_make_token(**kwargs)}"}


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)


def _users(count: int, start: int = 100) -> list[dict]:
    return [{"id": start + i, "name": f"User {start + i}"} for i in range(count)]


def test_healthz(client):
    resp = client.get("/healthz")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert resp.headers["X-Request-ID"]


def test_request_id_is_echoed(client):
    resp = client.get("/healthz", headers={"X-Request-ID": "abc123"})

    assert resp.headers["X-Request-ID"] == "abc123"


def test_render_requires_auth(client):
    resp = client.post("/api/v1/system-messages/render", json={})

    assert resp.status_code in (401, 403)


def test_render_added_with_collapsed_users(client):
    users = [{"id": 1, "name": "Alice"}, *_users(20)]
    body = {
        "message": {
            "type": "participants_added",
            "sender_id": 1,
            "user_ids": [u["id"] for u in users[1:]],
        },
        "users": users,
    }

    resp = client.post("/api/v1/system-messages/render", json=body, headers=_auth())

    assert resp.status_code == 200
    data = resp.json()
    assert data["action"] == "added"
    assert data["icon"] == "plus"
    assert len(data["shown_user_ids"]) == 15
    assert data["collapsed_user_ids"] == data["selected_user_ids"]
    assert len(data["collapsed_user_ids"]) == 5
    assert data["show_more_url"] == "action://show-all"
    assert data["title"]["text"].startswith("Alice added User 100, ")
    assert data["title"]["text"].endswith(", and 5 others")
    assert data["heading"] is None


def test_render_marks_principal_as_self(client):
    users = [{"id": 1, "name": "Alice"}, {"id": SELF_ID, "name": "Me"}, {"id": 2, "name": "Bob"}]
    body = {
        "message": {"type": "participants_removed", "sender_id": 1, "user_ids": [SELF_ID, 2]},
        "users": users,
    }

    resp = client.post("/api/v1/system-messages/render", json=body, headers=_auth())

    data = resp.json()
    assert data["self_included"] is True
    assert data["shown_user_ids"] == [2, SELF_ID]
    assert data["title"]["text"] == "Alice removed Bob and you"


def test_render_started_with_invite_button(client):
    conversation_id = str(uuid.uuid4())
    users = [{"id": 1, "name": "Alice Smith"}, {"id": 2, "name": "Bob Builder"}]
    body = {
        "message": {
            "type": "new_conversation",
            "sender_id": 1,
            "user_ids": [2],
            "text": "Design",
        },
        "users": users,
        "conversation": {
            "id": conversation_id,
            "display_name": "Design",
            "active_participant_ids": [1, 2],
            "can_manage_access": True,
            "allow_guests": True,
        },
    }

    resp = client.post("/api/v1/system-messages/render", json=body, headers=_auth())

    data = resp.json()
    assert data["show_invite_button"] is True
    assert data["heading"]["text"] == "Alice started the conversation\nDesign"
    assert data["title"]["text"] == "Alice started a conversation with Bob"


def test_render_incomplete_style_has_no_text(client):
    body = {
        "message": {"type": "participants_removed", "sender_id": 1, "user_ids": [1]},
        "users": [{"id": 1, "name": "Alice"}],
        "style": {"font": "regular"},
    }

    resp = client.post("/api/v1/system-messages/render", json=body, headers=_auth())

    data = resp.json()
    assert data["action"] == "left"
    assert data["title"] is None
    assert data["shown_user_ids"] == []


def test_render_unknown_user_is_rejected(client):
    body = {
        "message": {"type": "participants_added", "sender_id": 1, "user_ids": [99]},
        "users": [{"id": 1, "name": "Alice"}],
    }

    resp = client.post("/api/v1/system-messages/render", json=body, headers=_auth())

    assert resp.status_code == 422
    assert "99" in resp.json()["detail"]


def test_invitation_channels(client):
    resp = client.get("/api/v1/invitations/channels", headers=_auth())

    assert resp.status_code == 200
    assert resp.json() == {"email": True, "sms": False}


def test_create_email_invitation(client):
    body = {"contact": {"name": "Bob", "emails": ["bob@example.com"]}, "email": "bob@example.com"}

    resp = client.post("/api/v1/invitations", json=body, headers=_auth())

    assert resp.status_code == 200
    data = resp.json()
    assert data["channel"] == "email"
    assert data["recipients"] == ["bob@example.com"]
    assert "@me" in data["body"]
    assert data["url"].startswith("mailto:")


def test_sms_invitation_unavailable(client):
    body = {"contact": {"name": "Bob", "phone_numbers": ["+4912"]}, "phone_number": "+4912"}

    resp = client.post("/api/v1/invitations", json=body, headers=_auth())

    assert resp.status_code == 503


def test_sms_invitation_with_overridden_composer(app):
    app.dependency_overrides[get_composer] = lambda: UrlSchemeComposer(sms_enabled=True)
    client = TestClient(app)
    body = {"contact": {"name": "Bob", "phone_numbers": ["+4912"]}, "phone_number": "+4912"}

    resp = client.post("/api/v1/invitations", json=body, headers=_auth(handle=None))

    assert resp.status_code == 200
    assert resp.json()["url"].startswith("sms:+4912?body=")
    assert "@" not in resp.json()["body"]


def test_invitation_needs_exactly_one_address(client):
    body = {"contact": {"name": "Bob"}}

    resp = client.post("/api/v1/invitations", json=body, headers=_auth())

    assert resp.status_code == 422
