"""Validation and partial-update helpers shared by the grocery and fridge ledgers."""

from typing import Any

from src.services.exceptions import InvalidInput
from src.services.name_key import clean_text, make_name_key

# Fields a caller may change on an existing ledger row
UPDATABLE_FIELDS = frozenset({"name", "quantity", "unit", "brand", "label", "expiration_date"})


def validate_name(name: str | None) -> str:
    """Return the trimmed display name or raise InvalidInput."""
    if not make_name_key(name):
        raise InvalidInput("Name is required")
    return name.strip()


def validate_quantity(quantity: float | None) -> float:
    """Reject missing, zero and negative quantities."""
    if quantity is None or quantity <= 0:
        raise InvalidInput("Quantity must be a positive number")
    return quantity


def validate_changes(changes: dict[str, Any]) -> dict[str, Any]:
    """Validate a partial update and return the cleaned values to apply.

    Only keys present in ``changes`` are returned; a key mapped to ``None`` is an
    explicit clear and is only allowed for nullable fields.
    """
    unknown = set(changes) - UPDATABLE_FIELDS
    if unknown:
        raise InvalidInput(f"Cannot update field(s): {', '.join(sorted(unknown))}")

    cleaned: dict[str, Any] = {}
    for field, value in changes.items():
        if field == "name":
            cleaned["name"] = validate_name(value)
            cleaned["name_key"] = make_name_key(value)
        elif field == "quantity":
            cleaned["quantity"] = validate_quantity(value)
        elif field == "unit":
            unit = clean_text(value)
            if unit is None:
                raise InvalidInput("Unit cannot be empty")
            cleaned["unit"] = unit
        elif field == "expiration_date":
            cleaned["expiration_date"] = value
        else:
            cleaned[field] = clean_text(value)
    return cleaned


def apply_changes(item: Any, cleaned: dict[str, Any]) -> None:
    """Copy validated values onto a ledger row.

    The pantry reference is never touched: renaming a row recomputes its
    name key but keeps its canonical identity.
    """
    for field, value in cleaned.items():
        setattr(item, field, value)
