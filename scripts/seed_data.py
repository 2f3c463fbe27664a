# app/scripts/seed_data.py
import asyncio
import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from core.database import build_engine, build_session_factory, init_models
from core.security import hash_password
from models.user import UserRole
from services.storage import CharityStorage

logger = logging.getLogger(__name__)

# ========== کاربران نمونه ==========
DEMO_USERS = {
    "admin": {"email": "admin@dcms.org", "password": "admin123", "name": "Admin User", "role": UserRole.ADMIN},
    "donor1": {"email": "john@example.com", "password": "donor123", "name": "John Doe", "role": UserRole.DONOR},
    "donor2": {"email": "sarah@example.com", "password": "donor123", "name": "Sarah Smith", "role": UserRole.DONOR},
    "volunteer1": {"email": "mike@example.com", "password": "volunteer123", "name": "Mike Johnson", "role": UserRole.VOLUNTEER},
}

# ========== کمپین‌های نمونه ==========
DEMO_CAMPAIGNS = [
    {
        "name": "Build Community Center",
        "description": "Help us build a new community center to serve families in need. This center will "
                       "provide educational programs, recreational activities, and support services.",
        "goal_amount": Decimal("50000"),
    },
    {
        "name": "Emergency Food Relief",
        "description": "Support our emergency food relief program providing meals to families facing "
                       "food insecurity in our community.",
        "goal_amount": Decimal("25000"),
    },
    {
        "name": "Education Scholarship Fund",
        "description": "Create opportunities for underprivileged students by funding scholarships for "
                       "higher education and vocational training.",
        "goal_amount": Decimal("100000"),
    },
]

# (donor, campaign index, amount)
DEMO_DONATIONS = [
    ("donor1", 0, Decimal("5000")),
    ("donor1", 1, Decimal("1000")),
    ("donor2", 0, Decimal("2500")),
    ("donor2", 2, Decimal("10000")),
]

# (campaign index, description, amount)
DEMO_FUND_USAGE = [
    (0, "Purchased construction materials", Decimal("2000")),
    (1, "Bulk food purchase from suppliers", Decimal("500")),
]


async def seed(storage: CharityStorage) -> bool:
    """Load the demo data set. Returns False if the database already has it."""

    if await storage.get_user_by_username("admin"):
        logger.info("Demo data already present, skipping")
        return False

    # 1. کاربران
    users = {}
    for username, data in DEMO_USERS.items():
        users[username] = await storage.create_user(
            username=username,
            email=data["email"],
            hashed_password=hash_password(data["password"]),
            name=data["name"],
            role=data["role"],
        )
    logger.info("✓ Created users")

    # 2. کمپین‌ها و کمک‌ها
    campaigns = [await storage.create_campaign(**data) for data in DEMO_CAMPAIGNS]
    for username, index, amount in DEMO_DONATIONS:
        await storage.create_donation(
            donor_id=users[username].id,
            campaign_id=campaigns[index].id,
            amount=amount,
        )
    logger.info("✓ Created campaigns and donations")

    # 3. رویدادها
    start = datetime.now(timezone.utc).replace(hour=10, minute=0, second=0, microsecond=0)
    events = [
        await storage.create_event(
            title="Community Food Drive",
            description="Join us in collecting and distributing food to families in need",
            date=start + timedelta(days=30),
            location="123 Main St, Community Hall",
        ),
        await storage.create_event(
            title="Holiday Toy Distribution",
            description="Help distribute toys to children during the holiday season",
            date=start + timedelta(days=35, hours=4),
            location="456 Oak Ave, Central Park",
        ),
    ]
    for event in events:
        await storage.create_volunteer_assignment(
            volunteer_id=users["volunteer1"].id,
            event_id=event.id,
        )
    logger.info("✓ Created events and volunteer assignments")

    # 4. هزینه‌کرد
    for index, description, amount in DEMO_FUND_USAGE:
        await storage.create_fund_usage(
            campaign_id=campaigns[index].id,
            description=description,
            amount_spent=amount,
        )
    logger.info("✓ Created fund usage records")

    return True


async def init_db(database_url: str = None):
    engine = build_engine(database_url)
    try:
        await init_models(engine)
        if await seed(CharityStorage(build_session_factory(engine))):
            print("✅ Database seeded")
            print("Admin: username=admin, password=admin123")
            print("Donor: username=donor1, password=donor123")
            print("Volunteer: username=volunteer1, password=volunteer123")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(init_db())
