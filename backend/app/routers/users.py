"""Users router for OAuth-backed accounts and their purchase history."""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db
from app.models.enums import OAuthProvider
from app.schemas.users import UserCreate, UserResponse
from app.schemas.purchases import PurchaseResponse
from app.services import users as user_service
from app.services import purchases as purchase_service

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user_data: UserCreate, db: AsyncSession = Depends(get_db)):
    """
    Create a user from an OAuth provider payload.

    Email must be unique.
    """
    try:
        user = await user_service.create_user(db, user_data)
    except IntegrityError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered"
        )
    return user


@router.get("/oauth", response_model=Optional[UserResponse])
async def get_user_by_oauth(
    oauth_provider: OAuthProvider,
    oauth_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Look up a user by provider and provider subject id. Returns null if none."""
    return await user_service.get_user_by_oauth(db, oauth_provider, oauth_id)


@router.get("/{user_id}/purchases", response_model=list[PurchaseResponse])
async def get_user_purchases(user_id: str, db: AsyncSession = Depends(get_db)):
    """List a user's purchases, most recent first."""
    return await purchase_service.get_user_purchases(db, user_id)
