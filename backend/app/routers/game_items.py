"""Game items router for browsing and maintaining the catalog."""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db
from app.models.enums import GameType
from app.schemas.game_items import GameItemCreate, GameItemUpdate, GameItemResponse
from app.services import game_items as game_item_service

router = APIRouter()


@router.post("", response_model=GameItemResponse, status_code=status.HTTP_201_CREATED)
async def create_game_item(item_data: GameItemCreate, db: AsyncSession = Depends(get_db)):
    """Add an item to the catalog. Availability defaults to true."""
    return await game_item_service.create_game_item(db, item_data)


@router.get("", response_model=list[GameItemResponse])
async def get_all_game_items(db: AsyncSession = Depends(get_db)):
    """List all available game items (public)."""
    return await game_item_service.get_all_game_items(db)


@router.get("/type/{game_type}", response_model=list[GameItemResponse])
async def get_game_items_by_type(game_type: GameType, db: AsyncSession = Depends(get_db)):
    """List available game items for one game."""
    return await game_item_service.get_game_items_by_type(db, game_type)


@router.get("/{item_id}", response_model=Optional[GameItemResponse])
async def get_game_item_by_id(item_id: int, db: AsyncSession = Depends(get_db)):
    """Get one available game item. Returns null if missing or unavailable."""
    return await game_item_service.get_game_item_by_id(db, item_id)


@router.patch("/{item_id}", response_model=Optional[GameItemResponse])
async def update_game_item(
    item_id: int,
    item_data: GameItemUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    Partially update a game item.

    - Omitted fields keep their value
    - image_url may be set to null
    - Setting is_available to false hides the item
    - Returns null if the item does not exist
    """
    return await game_item_service.update_game_item(db, item_id, item_data)
