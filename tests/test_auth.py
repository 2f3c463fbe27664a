from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from core.config import settings
from core.security import create_access_token, decode_token
from tests.utils import auth


async def test_register_returns_user_and_token(client):
    response = await client.post("/api/auth/register", json={
        "username": "alice",
        "email": "alice@x.com",
        "password": "secret1",
        "name": "Alice",
        "role": "DONOR",
    })

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["username"] == "alice"
    assert body["user"]["role"] == "DONOR"
    assert "password" not in body["user"]
    assert "hashedPassword" not in body["user"]

    claims = decode_token(body["token"])
    assert claims["id"] == body["user"]["id"]
    assert claims["username"] == "alice"
    assert claims["role"] == "DONOR"


async def test_duplicate_username_is_rejected(client, register, storage):
    await register("alice")

    response = await client.post("/api/auth/register", json={
        "username": "alice",
        "email": "other@x.com",
        "password": "secret1",
        "name": "Other",
        "role": "DONOR",
    })

    assert response.status_code == 400
    assert response.json()["message"] == "Username already exists"
    assert len(await storage.get_all_users()) == 1


async def test_duplicate_email_is_rejected(client, register):
    await register("alice", email="shared@x.com")

    response = await client.post("/api/auth/register", json={
        "username": "bob",
        "email": "shared@x.com",
        "password": "secret1",
        "name": "Bob",
        "role": "VOLUNTEER",
    })

    assert response.status_code == 400
    assert response.json()["message"] == "Email already exists"


@pytest.mark.parametrize("overrides, field, message", [
    ({"username": "al"}, "username", "Username must be at least 3 characters"),
    ({"password": "12345"}, "password", "Password must be at least 6 characters"),
    ({"name": "   "}, "name", "Name is required"),
    ({"role": "SUPERUSER"}, "role", "Role must be ADMIN, DONOR, or VOLUNTEER"),
])
async def test_register_validation(client, overrides, field, message):
    payload = {
        "username": "alice",
        "email": "alice@x.com",
        "password": "secret1",
        "name": "Alice",
        "role": "DONOR",
    }
    payload.update(overrides)

    response = await client.post("/api/auth/register", json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == message
    assert body["errors"][0]["field"] == field


async def test_register_rejects_bad_email(client):
    response = await client.post("/api/auth/register", json={
        "username": "alice",
        "email": "not-an-email",
        "password": "secret1",
        "name": "Alice",
        "role": "DONOR",
    })

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "email"


async def test_admin_registration_can_be_disabled(client, monkeypatch):
    monkeypatch.setattr(settings, "ALLOW_ADMIN_REGISTRATION", False)

    response = await client.post("/api/auth/register", json={
        "username": "root",
        "email": "root@x.com",
        "password": "secret1",
        "name": "Root",
        "role": "ADMIN",
    })

    assert response.status_code == 403
    assert response.json()["message"] == "Admin registration is disabled"


async def test_login(client, register):
    registered = await register("alice")

    response = await client.post("/api/auth/login", json={"username": "alice", "password": "secret123"})

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["id"] == registered["user"]["id"]
    assert decode_token(body["token"])["role"] == "DONOR"


async def test_login_failures_are_indistinguishable(client, register):
    await register("alice")

    wrong_password = await client.post("/api/auth/login", json={"username": "alice", "password": "nope123"})
    unknown_user = await client.post("/api/auth/login", json={"username": "mallory", "password": "nope123"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json() == {"message": "Invalid credentials"}


async def test_login_requires_both_fields(client):
    response = await client.post("/api/auth/login", json={"username": "", "password": "x"})

    assert response.status_code == 400
    assert response.json()["message"] == "Username is required"


async def test_missing_token(client):
    response = await client.get("/api/campaigns")

    assert response.status_code == 401
    assert response.json() == {"message": "Authentication required"}
    assert response.headers["www-authenticate"] == "Bearer"


async def test_garbage_token(client):
    response = await client.get("/api/campaigns", headers=auth("not.a.jwt"))

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid or expired token"}


async def test_expired_token(client, donor):
    token = create_access_token(donor["user"]["id"], "alice", "DONOR", expires_minutes=-1)

    response = await client.get("/api/campaigns", headers=auth(token))

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"


async def test_token_signed_with_another_key(client, donor):
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {
            "sub": str(donor["user"]["id"]),
            "id": donor["user"]["id"],
            "username": "alice",
            "role": "ADMIN",
            "type": "access",
            "iat": now,
            "exp": now + timedelta(minutes=5),
        },
        "someone-elses-key",
        algorithm="HS256",
    )

    response = await client.get("/api/admin/stats", headers=auth(token))

    assert response.status_code == 401


@pytest.mark.parametrize("path", [
    "/api/admin/stats",
    "/api/admin/users",
    "/api/admin/events",
    "/api/admin/reports/campaigns/csv",
    "/api/volunteer/stats",
])
async def test_donor_cannot_reach_other_roles(client, donor, path):
    response = await client.get(path, headers=auth(donor))

    assert response.status_code == 403
    assert response.json() == {"message": "Insufficient permissions"}


async def test_volunteer_cannot_donate(client, volunteer, create_campaign):
    campaign = await create_campaign()

    response = await client.post(
        "/api/donor/donations",
        json={"campaignId": campaign["id"], "amount": "10"},
        headers=auth(volunteer),
    )

    assert response.status_code == 403


async def test_every_role_can_list_campaigns(client, admin, donor, volunteer):
    for user in (admin, donor, volunteer):
        response = await client.get("/api/campaigns", headers=auth(user))
        assert response.status_code == 200


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
