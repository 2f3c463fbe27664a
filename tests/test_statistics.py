from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from services.statistics_service import progress_percentage, to_money
from tests.utils import auth, money


@pytest.mark.parametrize("total, goal, expected", [
    (0, 500, 0),
    (250, 1000, 25),
    (33333, 100000, 33),
    (33500, 100000, 34),
    ("0.50", 100, 1),
    (1500, 1000, 100),
])
def test_progress_percentage(total, goal, expected):
    assert progress_percentage(total, goal) == expected


def test_to_money():
    assert to_money(None) == Decimal("0.00")
    assert to_money(12.5) == Decimal("12.50")
    assert to_money("7") == Decimal("7.00")


async def test_admin_stats_empty(client, admin):
    response = await client.get("/api/admin/stats", headers=auth(admin))

    assert response.status_code == 200
    body = response.json()
    assert body["totalCampaigns"] == 0
    assert body["totalDonations"] == 0
    assert body["activeVolunteers"] == 0
    assert money(body["totalRaised"]) == 0


async def test_admin_stats(client, admin, register, create_campaign, donate):
    alice = await register("alice")
    await register("victor", role="VOLUNTEER")
    await register("vera", role="VOLUNTEER")
    water = await create_campaign(name="Water")
    food = await create_campaign(name="Food")
    await donate(alice, water["id"], "100")
    await donate(alice, food["id"], "50.25")

    body = (await client.get("/api/admin/stats", headers=auth(admin))).json()

    assert body["totalCampaigns"] == 2
    assert body["totalDonations"] == 2
    assert body["activeVolunteers"] == 2
    assert money(body["totalRaised"]) == money("150.25")


async def test_donor_stats_without_donations(client, donor):
    body = (await client.get("/api/donor/stats", headers=auth(donor))).json()

    assert money(body["totalDonated"]) == 0
    assert body["campaignsSupported"] == 0
    assert body["lastDonation"] is None


async def test_donor_stats(client, register, create_campaign, donate):
    alice = await register("alice")
    bob = await register("bob")
    water = await create_campaign(name="Water")
    food = await create_campaign(name="Food")
    await donate(alice, water["id"], "10")
    await donate(alice, water["id"], "15")
    await donate(alice, food["id"], "5")
    await donate(bob, food["id"], "1000")

    body = (await client.get("/api/donor/stats", headers=auth(alice))).json()

    assert money(body["totalDonated"]) == money("30")
    assert body["campaignsSupported"] == 2
    assert body["lastDonation"] is not None


async def test_volunteer_stats(client, admin, volunteer, create_event):
    now = datetime.now(timezone.utc)
    past = await create_event(title="Past", date=(now - timedelta(days=10)).isoformat())
    future = await create_event(title="Future", date=(now + timedelta(days=10)).isoformat())
    await create_event(title="Unassigned", date=(now + timedelta(days=3)).isoformat())
    for event in (past, future):
        response = await client.post(
            "/api/admin/volunteer-assignments",
            json={"volunteerId": volunteer["user"]["id"], "eventId": event["id"]},
            headers=auth(admin),
        )
        assert response.status_code == 200

    body = (await client.get("/api/volunteer/stats", headers=auth(volunteer))).json()

    assert body == {"upcomingEvents": 1, "totalEvents": 2, "hoursVolunteered": 8}


async def test_volunteer_stats_without_events(client, volunteer):
    body = (await client.get("/api/volunteer/stats", headers=auth(volunteer))).json()

    assert body == {"upcomingEvents": 0, "totalEvents": 0, "hoursVolunteered": 0}


async def test_upcoming_uses_given_clock(statistics, storage, volunteer):
    event = await storage.create_event(
        title="Cleanup",
        description="Beach cleanup along the north shore",
        date=datetime(2030, 6, 1, 9, 0, tzinfo=timezone.utc),
        location="North Beach",
    )
    await storage.create_volunteer_assignment(volunteer_id=volunteer["user"]["id"], event_id=event.id)

    before = await statistics.get_volunteer_stats(
        volunteer["user"]["id"], now=datetime(2030, 5, 31, tzinfo=timezone.utc)
    )
    after = await statistics.get_volunteer_stats(
        volunteer["user"]["id"], now=datetime(2030, 6, 2, tzinfo=timezone.utc)
    )

    assert before.upcoming_events == 1
    assert after.upcoming_events == 0
    assert after.hours_volunteered == 4
