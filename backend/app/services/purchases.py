"""Purchase workflow and purchase accessors."""
import logging
from typing import List, Optional
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc
from app.models.enums import PurchaseStatus
from app.models.purchase import Purchase
from app.schemas.purchases import PurchaseCreate
from app.services.game_items import get_game_item_by_id
from app.services.users import get_user_by_id

logger = logging.getLogger(__name__)


async def create_purchase(db: AsyncSession, purchase_data: PurchaseCreate) -> Purchase:
    """
    Record a purchase of one game item by one user.

    - Verifies the user exists (404 otherwise)
    - Verifies the item exists (404 otherwise) and is available (400 otherwise)
    - Inserts the purchase as pending with the caller's price_paid

    The checks and the insert are separate statements; availability is only
    evaluated at this point and is not locked against concurrent updates.
    price_paid is not compared with the item's current price.
    """
    user = await get_user_by_id(db, purchase_data.user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with id {purchase_data.user_id} not found"
        )
    
    item = await get_game_item_by_id(db, purchase_data.item_id, available_only=False)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Game item with id {purchase_data.item_id} not found"
        )
    
    if not item.is_available:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Game item with id {purchase_data.item_id} is not available for purchase"
        )
    
    purchase = Purchase(
        user_id=user.id,
        item_id=item.id,
        price_paid=purchase_data.price_paid,
        status=PurchaseStatus.PENDING,
    )
    
    db.add(purchase)
    await db.commit()
    await db.refresh(purchase)
    
    logger.info(f"Purchase created: {purchase.id} user={user.id} item={item.id} price_paid={purchase.price_paid}")
    return purchase


async def get_user_purchases(db: AsyncSession, user_id: str) -> List[Purchase]:
    """List a user's purchases, most recent first."""
    result = await db.execute(
        select(Purchase)
        .where(Purchase.user_id == user_id)
        .order_by(desc(Purchase.purchase_date))
    )
    return list(result.scalars().all())


async def update_purchase_status(
    db: AsyncSession,
    purchase_id: str,
    new_status: PurchaseStatus
) -> Optional[Purchase]:
    """
    Overwrite a purchase's status. Any status may follow any other.

    Returns None if no purchase has this id.
    """
    result = await db.execute(select(Purchase).where(Purchase.id == purchase_id))
    purchase = result.scalar_one_or_none()
    
    if purchase is None:
        return None
    
    previous = purchase.status
    purchase.status = new_status
    await db.commit()
    await db.refresh(purchase)
    
    logger.info(f"Purchase {purchase.id} status: {previous.value} -> {purchase.status.value}")
    return purchase
