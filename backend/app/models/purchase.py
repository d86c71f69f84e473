"""Purchase model for the game store."""
from datetime import datetime
from decimal import Decimal
from uuid import uuid4
from sqlalchemy import String, Integer, Numeric, DateTime, ForeignKey, Enum as SAEnum, Index, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.database import Base
from app.models.enums import PurchaseStatus, enum_values


class Purchase(Base):
    """Record of one user acquiring one game item."""
    
    __tablename__ = "purchases"
    
    # Primary key
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    
    # Foreign keys
    user_id: Mapped[str] = mapped_column(String(36), ForeignKey("users.id"), nullable=False)
    item_id: Mapped[int] = mapped_column(Integer, ForeignKey("game_items.id"), nullable=False)
    
    # Price at purchase time, independent of the item's current price
    price_paid: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[PurchaseStatus] = mapped_column(
        SAEnum(PurchaseStatus, name="purchase_status", values_callable=enum_values),
        default=PurchaseStatus.PENDING,
        nullable=False,
    )
    
    # Timestamps
    purchase_date: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
    
    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="purchases", foreign_keys=[user_id])
    item: Mapped["GameItem"] = relationship("GameItem", back_populates="purchases", foreign_keys=[item_id])
    
    # Indexes
    __table_args__ = (
        Index("idx_purchase_user_date", "user_id", "purchase_date"),
        Index("idx_purchase_item_id", "item_id"),
        CheckConstraint("price_paid > 0", name="price_paid_positive"),
    )
    
    def __repr__(self) -> str:
        return f"<Purchase(id={self.id}, user_id={self.user_id}, item_id={self.item_id}, status={self.status})>"
