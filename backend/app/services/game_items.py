"""Read and write accessors for the game item catalog."""
import logging
from datetime import datetime, timedelta
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.models.enums import GameType
from app.models.game_item import GameItem
from app.schemas.game_items import GameItemCreate, GameItemUpdate

logger = logging.getLogger(__name__)


async def create_game_item(db: AsyncSession, item_data: GameItemCreate) -> GameItem:
    """Persist a new catalog item. Both timestamps are set to the creation instant."""
    now = datetime.utcnow()
    item = GameItem(
        title=item_data.title,
        description=item_data.description,
        detailed_description=item_data.detailed_description,
        price=item_data.price,
        game_type=item_data.game_type,
        image_url=item_data.image_url,
        is_available=item_data.is_available,
        created_at=now,
        updated_at=now,
    )
    
    db.add(item)
    await db.commit()
    await db.refresh(item)
    
    logger.info(f"Game item created: {item.id} '{item.title}' ({item.game_type.value}) at {item.price}")
    return item


async def get_all_game_items(db: AsyncSession) -> List[GameItem]:
    """List every available game item."""
    result = await db.execute(
        select(GameItem)
        .where(GameItem.is_available == True)
        .order_by(GameItem.id)
    )
    return list(result.scalars().all())


async def get_game_items_by_type(db: AsyncSession, game_type: GameType) -> List[GameItem]:
    """List available game items in one product line."""
    result = await db.execute(
        select(GameItem)
        .where(GameItem.game_type == game_type, GameItem.is_available == True)
        .order_by(GameItem.id)
    )
    return list(result.scalars().all())


async def get_game_item_by_id(
    db: AsyncSession,
    item_id: int,
    available_only: bool = True
) -> Optional[GameItem]:
    """
    Fetch one game item by id.

    With ``available_only`` (the default) an unavailable item is reported as
    missing, the same as an id that does not exist.
    """
    query = select(GameItem).where(GameItem.id == item_id)
    if available_only:
        query = query.where(GameItem.is_available == True)
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def update_game_item(
    db: AsyncSession,
    item_id: int,
    updates: GameItemUpdate
) -> Optional[GameItem]:
    """
    Apply a partial update to a game item.

    Only supplied fields change. ``updated_at`` always moves forward, even when
    nothing else does. Returns None if no item has this id.
    """
    item = await get_game_item_by_id(db, item_id, available_only=False)
    if item is None:
        return None
    
    changes = updates.changes()
    for field, value in changes.items():
        setattr(item, field, value)
    
    # Strictly later than the previous value even on a coarse or skewed clock
    now = datetime.utcnow()
    if item.updated_at is not None and now <= item.updated_at:
        now = item.updated_at + timedelta(microseconds=1)
    item.updated_at = now
    
    await db.commit()
    await db.refresh(item)
    
    logger.info(f"Game item {item.id} updated: {sorted(changes) or 'no field changes'}")
    return item
