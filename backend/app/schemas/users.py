"""User schemas for OAuth-backed accounts."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field
from app.models.enums import OAuthProvider


class UserCreate(BaseModel):
    """Schema for creating a user from an OAuth provider payload."""
    
    email: EmailStr
    name: str = Field(..., max_length=255)
    avatar_url: Optional[str] = None
    oauth_provider: OAuthProvider
    oauth_id: str = Field(..., min_length=1, max_length=255)


class UserResponse(BaseModel):
    """Schema for user response."""
    
    id: str
    email: str
    name: str
    avatar_url: Optional[str] = None
    oauth_provider: OAuthProvider
    oauth_id: str
    created_at: datetime
    
    class Config:
        from_attributes = True
