"""Schemas for game item endpoints."""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from app.models.enums import GameType


class GameItemCreate(BaseModel):
    """Schema for creating a game item."""
    
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    detailed_description: str = Field(..., min_length=1)
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    game_type: GameType
    image_url: Optional[str] = None
    is_available: bool = True


class GameItemUpdate(BaseModel):
    """
    Partial update for a game item.

    Only fields present in the payload are written. ``image_url`` may be sent
    as null to clear it; every other field rejects an explicit null.
    """
    
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    detailed_description: Optional[str] = Field(None, min_length=1)
    price: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    game_type: Optional[GameType] = None
    image_url: Optional[str] = None
    is_available: Optional[bool] = None

    @field_validator(
        "title", "description", "detailed_description", "price", "game_type", "is_available"
    )
    @classmethod
    def reject_null(cls, v):
        """Non-nullable columns can be omitted but not cleared."""
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    def changes(self) -> dict:
        """Return only the fields the caller supplied, nulls included."""
        return self.model_dump(exclude_unset=True)


class GameItemResponse(BaseModel):
    """Schema for game item response."""
    
    id: int
    title: str
    description: str
    detailed_description: str
    price: float
    game_type: GameType
    image_url: Optional[str]
    is_available: bool
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True
