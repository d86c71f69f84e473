"""Schemas for purchase endpoints."""
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field
from app.models.enums import PurchaseStatus


class PurchaseCreate(BaseModel):
    """Schema for recording a purchase. Status is always set server-side."""
    
    user_id: str = Field(..., min_length=1)
    item_id: int
    price_paid: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)


class PurchaseStatusUpdate(BaseModel):
    """Schema for changing a purchase status."""
    
    status: PurchaseStatus


class PurchaseResponse(BaseModel):
    """Schema for purchase response."""
    
    id: str
    user_id: str
    item_id: int
    price_paid: float
    purchase_date: datetime
    status: PurchaseStatus
    
    class Config:
        from_attributes = True
