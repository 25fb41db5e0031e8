"""Grocery item model."""

from sqlalchemy import Boolean, Column, Date, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class GroceryItem(Base, TimestampMixin):
    """One shopping-list entry referencing a canonical pantry item."""

    __tablename__ = "grocery_items"
    # Fridge rows keep a back-reference to deleted grocery ids, so ids must never be reused
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    pantry_item_id = Column(Integer, ForeignKey("pantry_items.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    name_key = Column(String(255), nullable=True, index=True)  # Null on rows that predate name keys
    quantity = Column(Float, nullable=False, default=1)
    unit = Column(String(50), nullable=False, default="piece")
    brand = Column(String(255), nullable=True)
    label = Column(String(100), nullable=True)
    expiration_date = Column(Date, nullable=True)
    checked = Column(Boolean, nullable=False, default=False)

    # Relationships
    pantry_item = relationship("PantryItem")
