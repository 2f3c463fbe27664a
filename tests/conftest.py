import os

os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

import httpx
import pytest

from core.database import init_models
from main import create_app
from tests.utils import auth


@pytest.fixture
async def app(tmp_path):
    app = create_app(f"sqlite+aiosqlite:///{tmp_path / 'charity.db'}")
    await init_models(app.state.engine)
    yield app
    await app.state.engine.dispose()


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


@pytest.fixture
def storage(app):
    return app.state.storage


@pytest.fixture
def statistics(app):
    return app.state.statistics


@pytest.fixture
def register(client):
    async def _register(username, role="DONOR", **overrides):
        payload = {
            "username": username,
            "email": f"{username}@example.com",
            "password": "secret123",
            "name": username.title(),
            "role": role,
        }
        payload.update(overrides)
        response = await client.post("/api/auth/register", json=payload)
        assert response.status_code == 200, response.text
        return response.json()
    return _register


@pytest.fixture
async def admin(register):
    return await register("admin", role="ADMIN")


@pytest.fixture
async def donor(register):
    return await register("alice", role="DONOR", email="alice@x.com")


@pytest.fixture
async def volunteer(register):
    return await register("victor", role="VOLUNTEER")


@pytest.fixture
def create_campaign(client, admin):
    async def _create(name="Clean Water", goal="1000", description="Wells for three villages"):
        response = await client.post(
            "/api/admin/campaigns",
            json={"name": name, "description": description, "goalAmount": goal},
            headers=auth(admin),
        )
        assert response.status_code == 200, response.text
        return response.json()
    return _create


@pytest.fixture
def donate(client):
    async def _donate(user, campaign_id, amount):
        response = await client.post(
            "/api/donor/donations",
            json={"campaignId": campaign_id, "amount": amount},
            headers=auth(user),
        )
        assert response.status_code == 200, response.text
        return response.json()
    return _donate


@pytest.fixture
def create_event(client, admin):
    async def _create(title="Food Drive", date="2030-01-15T10:00:00Z", location="Community Hall"):
        response = await client.post(
            "/api/admin/events",
            json={
                "title": title,
                "description": "Collecting and sorting donated food",
                "date": date,
                "location": location,
            },
            headers=auth(admin),
        )
        assert response.status_code == 200, response.text
        return response.json()
    return _create
