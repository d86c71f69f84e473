"""Authentication schemas for OAuth sign-in."""
from typing import Optional
from pydantic import BaseModel, EmailStr, Field
from app.models.enums import OAuthProvider


class OAuthLoginRequest(BaseModel):
    """Schema for an OAuth sign-in attempt."""
    
    provider: OAuthProvider
    token: str = Field(..., min_length=1, description="Provider-issued credential")


class OAuthIdentity(BaseModel):
    """Identity asserted by a provider after verification."""

    provider: OAuthProvider
    subject_id: str
    email: EmailStr
    name: str
    avatar_url: Optional[str] = None
