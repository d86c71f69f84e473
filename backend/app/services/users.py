"""Read and write accessors for OAuth-backed users."""
import logging
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from app.models.enums import OAuthProvider
from app.models.user import User
from app.schemas.users import UserCreate

logger = logging.getLogger(__name__)


async def create_user(db: AsyncSession, user_data: UserCreate) -> User:
    """
    Persist a new user from an OAuth provider payload.

    Raises IntegrityError when the email is already registered; the session is
    rolled back before the error propagates.
    """
    user = User(
        email=user_data.email,
        name=user_data.name,
        avatar_url=user_data.avatar_url,
        oauth_provider=user_data.oauth_provider,
        oauth_id=user_data.oauth_id,
    )
    
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.warning(f"User creation rejected, email already registered: {user_data.email}")
        raise
    await db.refresh(user)
    
    logger.info(f"User created: {user.id} ({user.oauth_provider.value})")
    return user


async def get_user_by_id(db: AsyncSession, user_id: str) -> Optional[User]:
    """Fetch a user by primary key, or None."""
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_oauth(
    db: AsyncSession,
    oauth_provider: OAuthProvider,
    oauth_id: str
) -> Optional[User]:
    """
    Fetch the user for a (provider, subject id) pair, or None.

    The pair is not unique-constrained; if several rows match, the first one
    returned by the store wins.
    """
    result = await db.execute(
        select(User)
        .where(User.oauth_provider == oauth_provider, User.oauth_id == oauth_id)
        .limit(1)
    )
    return result.scalars().first()
