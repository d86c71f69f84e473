"""Authentication router for OAuth sign-in."""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.auth.oauth import OAuthVerifier, get_oauth_verifier
from app.schemas.auth import OAuthLoginRequest
from app.schemas.users import UserCreate, UserResponse
from app.services import users as user_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/oauth", response_model=UserResponse)
async def oauth_sign_in(
    request: OAuthLoginRequest,
    verifier: OAuthVerifier = Depends(get_oauth_verifier),
    db: AsyncSession = Depends(get_db)
):
    """
    Sign in with an OAuth provider.

    - Verifies the credential with the provider
    - Returns the existing user for (provider, subject id)
    - Otherwise creates the user from the verified identity
    """
    identity = await verifier.verify(request.provider, request.token)

    user = await user_service.get_user_by_oauth(db, identity.provider, identity.subject_id)
    if user is not None:
        logger.info(f"OAuth sign-in for existing user {user.id}")
        return user

    try:
        user = await user_service.create_user(
            db,
            UserCreate(
                email=identity.email,
                name=identity.name,
                avatar_url=identity.avatar_url,
                oauth_provider=identity.provider,
                oauth_id=identity.subject_id,
            ),
        )
    except IntegrityError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered with another sign-in method"
        )
    return user
