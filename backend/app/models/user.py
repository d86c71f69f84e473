"""User model for the game store."""
from datetime import datetime
from uuid import uuid4
from sqlalchemy import String, DateTime, Enum as SAEnum, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.database import Base
from app.models.enums import OAuthProvider, enum_values


class User(Base):
    """User identity derived from a third-party OAuth sign-in."""
    
    __tablename__ = "users"
    
    # Primary key
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    
    # Profile
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    avatar_url: Mapped[str | None] = mapped_column(String, nullable=True)
    
    # OAuth identity; the (provider, subject) pair is looked up but not unique-constrained
    oauth_provider: Mapped[OAuthProvider] = mapped_column(
        SAEnum(OAuthProvider, name="oauth_provider", values_callable=enum_values),
        nullable=False,
    )
    oauth_id: Mapped[str] = mapped_column(String(255), nullable=False)
    
    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
    
    # Relationships
    purchases: Mapped[list["Purchase"]] = relationship("Purchase", back_populates="user")
    
    # Indexes
    __table_args__ = (
        Index("idx_user_oauth", "oauth_provider", "oauth_id"),
    )
    
    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, oauth_provider={self.oauth_provider})>"
