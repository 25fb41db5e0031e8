"""Recipe and RecipeIngredient models."""

from sqlalchemy import JSON, Column, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Recipe(Base, TimestampMixin):
    """Recipe model for storing recipe definitions."""

    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    photo_url = Column(String(2000), nullable=True)
    prep_time_minutes = Column(Integer, nullable=True)
    cook_time_minutes = Column(Integer, nullable=True)
    steps = Column(JSON, nullable=False, default=list)
    tags = Column(JSON, nullable=False, default=list)
    source_url = Column(String(2000), nullable=True)

    # Relationships
    user = relationship("User", backref="recipes")
    ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.position",
    )


class RecipeIngredient(Base):
    """Ingredient within a recipe, optionally linked to a canonical pantry item."""

    __tablename__ = "recipe_ingredients"

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    name = Column(String(255), nullable=False)
    quantity = Column(Float, nullable=True)
    unit = Column(String(50), nullable=True)
    label = Column(String(100), nullable=True)
    brand = Column(String(255), nullable=True)
    note = Column(String(500), nullable=True)
    pantry_item_id = Column(Integer, ForeignKey("pantry_items.id"), nullable=True, index=True)
    name_key = Column(String(255), nullable=True)

    # Relationships
    recipe = relationship("Recipe", back_populates="ingredients")
