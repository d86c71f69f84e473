"""Catalog seed script for the game store.

Inserts the demo GoStop and Poker items if they are not already present.
It is idempotent and safe to run on every container start.
"""

import asyncio
import logging
from decimal import Decimal
from sqlalchemy import select

from app.database import AsyncSessionLocal
from app.models.enums import GameType
from app.models.game_item import GameItem
from app.schemas.game_items import GameItemCreate
from app.services.game_items import create_game_item

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


DEMO_ITEMS = [
    GameItemCreate(
        title="Golden Dragon Card",
        description="Rare golden card with dragon design",
        detailed_description="This magnificent golden dragon card is a legendary artifact in the world of Gostop.",
        price=Decimal("29.99"),
        game_type=GameType.GOSTOP,
        image_url="https://images.unsplash.com/photo-1578662996442-48f60103fc96?w=400&h=300&fit=crop",
    ),
    GameItemCreate(
        title="Cherry Blossom Set",
        description="Beautiful spring-themed card collection",
        detailed_description="Experience the beauty of spring with this exclusive Cherry Blossom card set.",
        price=Decimal("19.99"),
        game_type=GameType.GOSTOP,
        image_url="https://images.unsplash.com/photo-1522383225653-ed111181a951?w=400&h=300&fit=crop",
    ),
    GameItemCreate(
        title="Royal Flush Chips",
        description="Premium casino-grade poker chips",
        detailed_description="Elevate your poker experience with these premium Royal Flush chips.",
        price=Decimal("49.99"),
        game_type=GameType.POKER,
        image_url="https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?w=400&h=300&fit=crop",
    ),
    GameItemCreate(
        title="Diamond Ace Cards",
        description="Luxury playing cards with diamond accents",
        detailed_description="These exclusive Diamond Ace cards represent the pinnacle of luxury gaming.",
        price=Decimal("79.99"),
        game_type=GameType.POKER,
        image_url="https://images.unsplash.com/photo-1515004707848-d8e4bded1b2a?w=400&h=300&fit=crop",
    ),
]


async def seed_game_items(session) -> int:
    """Create any demo item whose title is not in the catalog yet. Returns the number created."""
    created = 0
    for item_data in DEMO_ITEMS:
        result = await session.execute(
            select(GameItem).where(GameItem.title == item_data.title)
        )
        if result.scalars().first() is not None:
            logger.info(f"Game item '{item_data.title}' already exists, skipping")
            continue

        await create_game_item(session, item_data)
        created += 1

    logger.info(f"Seeded {created} game item(s)")
    return created


async def run():
    """Seed the configured database."""
    async with AsyncSessionLocal() as session:
        await seed_game_items(session)


def main():
    """Entry point for the seed script."""
    asyncio.run(run())


if __name__ == "__main__":
    main()
