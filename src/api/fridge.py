"""Fridge API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_current_user, get_fridge_service
from src.models.user import User
from src.schemas.fridge import FridgeItemCreate, FridgeItemResponse, FridgeItemUpdate
from src.schemas.ledger import DeletedResponse
from src.services.fridge_service import FridgeService

router = APIRouter(prefix="/api/v1/fridge", tags=["fridge"])


@router.get("", response_model=list[FridgeItemResponse])
def list_fridge_items(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[FridgeService, Depends(get_fridge_service)],
):
    """List the current user's fridge items, oldest first."""
    return service.list_for_user(current_user.id)


@router.post("", response_model=FridgeItemResponse, status_code=status.HTTP_201_CREATED)
def create_fridge_item(
    item_data: FridgeItemCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[FridgeService, Depends(get_fridge_service)],
):
    """Add an item to the fridge by hand."""
    return service.create(current_user.id, **item_data.model_dump())


@router.put("/{item_id}", response_model=FridgeItemResponse)
def update_fridge_item(
    item_id: int,
    item_data: FridgeItemUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[FridgeService, Depends(get_fridge_service)],
):
    """Update the fields present in the request body."""
    return service.update(current_user.id, item_id, item_data.model_dump(exclude_unset=True))


@router.delete("/{item_id}", response_model=DeletedResponse)
def delete_fridge_item(
    item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[FridgeService, Depends(get_fridge_service)],
):
    """Remove an item from the fridge."""
    item = service.delete(current_user.id, item_id)
    return DeletedResponse(id=item.id)
