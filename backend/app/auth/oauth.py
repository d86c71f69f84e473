"""OAuth identity verification behind a provider-agnostic interface."""
import logging
from abc import ABC, abstractmethod
from fastapi import HTTPException, status
from app.config import settings
from app.models.enums import OAuthProvider
from app.schemas.auth import OAuthIdentity

logger = logging.getLogger(__name__)


class OAuthVerifier(ABC):
    """Turns a provider credential into the identity it asserts."""

    @abstractmethod
    async def verify(self, provider: OAuthProvider, token: str) -> OAuthIdentity:
        """Return the verified identity or raise HTTPException 401."""


class MockOAuthVerifier(OAuthVerifier):
    """Stand-in verifier that accepts any token and returns a fixed identity per provider."""

    IDENTITIES = {
        OAuthProvider.GOOGLE: OAuthIdentity(
            provider=OAuthProvider.GOOGLE,
            subject_id="google_123456",
            email="user@gmail.com",
            name="John Doe",
            avatar_url="https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=100&h=100&fit=crop&crop=face",
        ),
        OAuthProvider.APPLE: OAuthIdentity(
            provider=OAuthProvider.APPLE,
            subject_id="apple_789012",
            email="user@icloud.com",
            name="Jane Smith",
            avatar_url="https://images.unsplash.com/photo-1494790108755-2616b612b786?w=100&h=100&fit=crop&crop=face",
        ),
    }

    async def verify(self, provider: OAuthProvider, token: str) -> OAuthIdentity:
        identity = self.IDENTITIES.get(provider)
        if identity is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=f"Unsupported OAuth provider: {provider}"
            )
        logger.info(f"{provider.value} authentication simulated for {identity.subject_id}")
        return identity.model_copy()


def get_oauth_verifier() -> OAuthVerifier:
    """
    FastAPI dependency returning the configured verifier.

    Only the stand-in verifier exists; a real provider integration plugs in
    here by subclassing OAuthVerifier.
    """
    if not settings.OAUTH_MOCK_ENABLED:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="OAuth sign-in is not configured"
        )
    return MockOAuthVerifier()
