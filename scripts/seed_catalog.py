"""
Seed the catalog with a few sample benefits.

Skips seeding when the catalog already has entries.
"""
import asyncio
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from marketplace.core.config import get_settings
from marketplace.infrastructure.database import Database
from marketplace.modules.benefits import BenefitCategory, BenefitInput, BenefitService

SAMPLE_BENEFITS = [
    ("Monthly metro pass", BenefitCategory.TRANSPORT, Decimal("60"), 100),
    ("Gym membership", BenefitCategory.HEALTH, Decimal("45"), 50),
    ("Cinema ticket", BenefitCategory.ENTERTAINMENT, Decimal("12"), 200),
    ("Museum annual card", BenefitCategory.CULTURE, Decimal("30"), 80),
]


async def seed_catalog() -> None:
    database = Database.from_settings(get_settings())
    await database.create_all()
    expires = datetime.now(timezone.utc) + timedelta(days=365)

    try:
        async with database.session() as db:
            service = BenefitService.with_session(db)
            if await service.list_benefits():
                print("Catalog already has benefits, nothing to seed")
                return

            for name, category, price, in_stock in SAMPLE_BENEFITS:
                benefit = await service.add_benefit(
                    BenefitInput(
                        name=name,
                        category=category,
                        price=price,
                        expiration_date=expires,
                        in_stock=in_stock,
                    )
                )
                print(f"{benefit.id}  {benefit.name} ({benefit.category.value}) {benefit.price}")
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(seed_catalog())
