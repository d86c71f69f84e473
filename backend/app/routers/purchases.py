"""Purchases router for recording purchases and tracking their status."""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db
from app.schemas.purchases import PurchaseCreate, PurchaseStatusUpdate, PurchaseResponse
from app.services import purchases as purchase_service

router = APIRouter()


@router.post("", response_model=PurchaseResponse, status_code=status.HTTP_201_CREATED)
async def create_purchase(purchase_data: PurchaseCreate, db: AsyncSession = Depends(get_db)):
    """
    Record a purchase.

    - 404 if the user or item does not exist
    - 400 if the item is not available
    - New purchases always start as pending
    """
    return await purchase_service.create_purchase(db, purchase_data)


@router.patch("/{purchase_id}/status", response_model=Optional[PurchaseResponse])
async def update_purchase_status(
    purchase_id: str,
    status_data: PurchaseStatusUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Set a purchase status. Returns null if the purchase does not exist."""
    return await purchase_service.update_purchase_status(db, purchase_id, status_data.status)
