"""Database models for the game store API."""
from app.models.user import User
from app.models.game_item import GameItem
from app.models.purchase import Purchase

__all__ = [
    "User",
    "GameItem",
    "Purchase",
]
