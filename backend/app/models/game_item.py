"""Game item model for the store catalog."""
from datetime import datetime
from decimal import Decimal
from sqlalchemy import String, Integer, Boolean, Numeric, DateTime, Enum as SAEnum, Index, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.database import Base
from app.models.enums import GameType, enum_values


class GameItem(Base):
    """Purchasable virtual item in one of the game product lines."""
    
    __tablename__ = "game_items"
    
    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    
    # Catalog info
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(String, nullable=False)
    detailed_description: Mapped[str] = mapped_column(String, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    game_type: Mapped[GameType] = mapped_column(
        SAEnum(GameType, name="game_type", values_callable=enum_values),
        nullable=False,
    )
    image_url: Mapped[str | None] = mapped_column(String, nullable=True)
    
    # Unavailable items are hidden from every read path
    is_available: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    
    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
    
    # Relationships
    purchases: Mapped[list["Purchase"]] = relationship("Purchase", back_populates="item")
    
    # Indexes
    __table_args__ = (
        Index("idx_game_item_type_available", "game_type", "is_available"),
        CheckConstraint("price > 0", name="price_positive"),
    )
    
    def __repr__(self) -> str:
        return f"<GameItem(id={self.id}, title={self.title}, game_type={self.game_type})>"
