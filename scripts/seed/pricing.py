#!/usr/bin/env python3
"""
Seed the default pricing plans shown on the public pricing page.

Existing plans (matched by name) are left untouched, so the script can be
re-run safely after an admin has edited prices.
"""

import asyncio
import os
import sys

# Add project root to path
project_root = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)
sys.path.insert(0, project_root)

from libs.db.config import AsyncSessionLocal
from services.catalog_service.models import PricingPlan
from sqlalchemy.future import select

DEFAULT_PLANS = [
    {
        "name": "Online Coaching",
        "price": 4000,
        "duration_days": 30,
        "features": [
            "Personalised training program",
            "Nutrition guidelines",
            "Weekly check-in by message",
        ],
        "most_popular": False,
    },
    {
        "name": "Personal Training",
        "price": 6000,
        "duration_days": 30,
        "features": [
            "Coached sessions in the gym",
            "Personalised training program",
            "Nutrition plan",
            "Progress tracking",
        ],
        "most_popular": True,
    },
    {
        "name": "Premium Transformation",
        "price": 9000,
        "duration_days": 30,
        "features": [
            "Everything in Personal Training",
            "Daily messaging support",
            "Monthly body composition review",
        ],
        "most_popular": False,
    },
]


async def seed_pricing_plans():
    """Create the default pricing plans."""
    async with AsyncSessionLocal() as session:
        async with session.begin():
            for plan_data in DEFAULT_PLANS:
                stmt = select(PricingPlan).where(PricingPlan.name == plan_data["name"])
                result = await session.execute(stmt)
                if result.scalar_one_or_none():
                    print(f"  Plan '{plan_data['name']}' already exists, skipping...")
                    continue

                session.add(PricingPlan(**plan_data))
                print(f"  Created plan: {plan_data['name']}")
                print(f"    - Price: {plan_data['price']} DZD / month")
                print(f"    - Features: {len(plan_data['features'])}")

            print("\n✓ Pricing plans seeded successfully!")


if __name__ == "__main__":
    print("Seeding default pricing plans...")
    asyncio.run(seed_pricing_plans())
