"""Pantry item model: the canonical product identity shared by groceries, fridge and recipes."""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class PantryItem(Base, TimestampMixin):
    """One canonical product per (user, name key, brand).

    ``brand`` is the display value and may be null; ``brand_key`` holds the same
    trimmed brand or an empty string so that "no brand" takes part in the unique
    constraint (NULLs never collide in SQL).
    """

    __tablename__ = "pantry_items"
    __table_args__ = (
        UniqueConstraint("user_id", "name_key", "brand_key", name="uq_pantry_user_name_key_brand"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)  # First display name ever supplied
    name_key = Column(String(255), nullable=False, index=True)  # Lowercase, whitespace-collapsed
    brand = Column(String(255), nullable=True)
    brand_key = Column(String(255), nullable=False, default="")
    label = Column(String(100), nullable=True)  # "Dairy", "Produce", ...
    default_unit = Column(String(50), nullable=True)

    # Relationships
    user = relationship("User", backref="pantry_items")
