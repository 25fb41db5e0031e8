"""Pantry API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_current_user, get_pantry_service
from src.models.user import User
from src.schemas.pantry import PantryItemResponse
from src.services.pantry_service import PantryService

router = APIRouter(prefix="/api/v1/pantry", tags=["pantry"])


@router.get("", response_model=list[PantryItemResponse])
def list_pantry_items(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """List the canonical items behind the user's groceries, fridge and recipes.

    Identities are created implicitly by ledger and recipe writes; there is no
    create or delete endpoint.
    """
    return service.list_for_user(current_user.id)
