"""Grocery list API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_current_user, get_fridge_service, get_grocery_service
from src.models.user import User
from src.schemas.grocery import (
    GroceryItemCreate,
    GroceryItemResponse,
    GroceryItemUpdate,
    GroceryToggleResponse,
)
from src.schemas.ledger import DeletedResponse
from src.services.exceptions import SyncError
from src.services.fridge_service import FridgeService
from src.services.grocery_service import GroceryService

router = APIRouter(prefix="/api/v1/groceries", tags=["groceries"])


@router.get("", response_model=list[GroceryItemResponse])
def list_grocery_items(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[GroceryService, Depends(get_grocery_service)],
):
    """List the current user's grocery items, newest first."""
    return service.list_for_user(current_user.id)


@router.post("", response_model=GroceryItemResponse, status_code=status.HTTP_201_CREATED)
def create_grocery_item(
    item_data: GroceryItemCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[GroceryService, Depends(get_grocery_service)],
):
    """Add an item to the grocery list."""
    return service.create(current_user.id, **item_data.model_dump())


@router.patch("/{item_id}", response_model=GroceryItemResponse)
def update_grocery_item(
    item_id: int,
    item_data: GroceryItemUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[GroceryService, Depends(get_grocery_service)],
):
    """Update the fields present in the request body."""
    return service.update(current_user.id, item_id, item_data.model_dump(exclude_unset=True))


@router.delete("/{item_id}", response_model=DeletedResponse)
def delete_grocery_item(
    item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[GroceryService, Depends(get_grocery_service)],
):
    """Delete a grocery item. A fridge item already synced from it is kept."""
    item = service.delete(current_user.id, item_id)
    return DeletedResponse(id=item.id)


@router.post("/{item_id}/toggle", response_model=GroceryToggleResponse)
def toggle_grocery_item(
    item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[GroceryService, Depends(get_grocery_service)],
    fridge_service: Annotated[FridgeService, Depends(get_fridge_service)],
):
    """Check or uncheck an item, adding it to or removing it from the fridge."""
    try:
        item = service.toggle(current_user.id, item_id)
    except SyncError as exc:
        return GroceryToggleResponse(
            item=GroceryItemResponse.model_validate(exc.grocery_item),
            synced=False,
            sync_error=str(exc),
        )

    fridge_item = (
        fridge_service.find_by_grocery_link(current_user.id, item.id) if item.checked else None
    )
    return GroceryToggleResponse(
        item=GroceryItemResponse.model_validate(item),
        fridge_item_id=fridge_item.id if fridge_item else None,
    )
