"""Enums for model fields."""

from enum import Enum


class AvailabilityStatus(str, Enum):
    """Where a recipe ingredient can currently be found."""

    FRIDGE_AND_GROCERY = "fridge-and-grocery"
    FRIDGE = "fridge"
    GROCERY = "grocery"
    MISSING = "missing"

