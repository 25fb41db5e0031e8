"""Fridge item model."""

from sqlalchemy import Boolean, Column, Date, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class FridgeItem(Base, TimestampMixin):
    """One fridge-stock entry referencing a canonical pantry item.

    Rows created by checking off a grocery item keep the grocery id in
    ``added_from_grocery_item_id``. That column is a plain back-reference rather
    than a foreign key: deleting the grocery row leaves the fridge row as it is.
    """

    __tablename__ = "fridge_items"
    # A re-checked grocery item must get a fresh fridge id, never a recycled one
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    pantry_item_id = Column(Integer, ForeignKey("pantry_items.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    name_key = Column(String(255), nullable=True, index=True)
    quantity = Column(Float, nullable=False, default=1)
    unit = Column(String(50), nullable=False, default="piece")
    brand = Column(String(255), nullable=True)
    label = Column(String(100), nullable=True)
    expiration_date = Column(Date, nullable=True)
    # At most one synced row per grocery item; NULL for manual rows
    added_from_grocery_item_id = Column(Integer, nullable=True, unique=True, index=True)
    added_manually = Column(Boolean, nullable=False, default=True)

    # Relationships
    pantry_item = relationship("PantryItem")
