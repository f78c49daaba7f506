"""Seed data script for development.

Creates a batch of campaigns with varied titles, rewards, statuses and end
dates so filtering, sorting and paging can be tried from the panel.

Environment Variables:
    SEED_CAMPAIGNS: Number of campaigns to create (default: 25)
    RESET_DATA: Set to "true" to delete existing campaigns first (default: false)

Usage:
    python -m scripts.seed_data
    RESET_DATA=true SEED_CAMPAIGNS=60 python -m scripts.seed_data
"""

import asyncio
import os
import random
from datetime import date, timedelta

SEED_CAMPAIGNS = int(os.getenv("SEED_CAMPAIGNS", "25"))
RESET_DATA = os.getenv("RESET_DATA", "false").lower() == "true"

from sqlalchemy import delete, func, select

from campaign_panel.core.database import async_session_maker, engine, init_models
from campaign_panel.models import Campaign, CampaignStatus

TITLES = [
    "Launch",
    "Spring Referral",
    "Summer Cashback",
    "Loyalty Boost",
    "Holiday Giveaway",
    "Weekend Streak",
    "First Purchase",
    "App Review",
]


def build_campaign(index: int) -> Campaign:
    title = f"{random.choice(TITLES)} #{index:03d}"
    end_date = date.today() + timedelta(days=random.randint(-30, 120))
    return Campaign(
        title=title,
        description=f"Seeded campaign {index} for local development",
        reward=random.choice([0, 50, 100, 250, 500, 1000]),
        status=random.choice(list(CampaignStatus)).value,
        end_date=end_date.isoformat(),
    )


async def seed_campaigns() -> int:
    async with async_session_maker() as session:
        if RESET_DATA:
            result = await session.execute(delete(Campaign))
            print(f"  Deleted {result.rowcount} existing campaigns")

        session.add_all(build_campaign(i) for i in range(1, SEED_CAMPAIGNS + 1))
        await session.commit()

        total = (await session.execute(select(func.count()).select_from(Campaign))).scalar_one()
    return total


async def main():
    print("Seeding campaigns...")
    await init_models()
    total = await seed_campaigns()
    print(f"  Created {SEED_CAMPAIGNS} campaigns, {total} in table")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
