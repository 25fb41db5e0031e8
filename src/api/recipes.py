"""Recipe API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import get_current_user, get_recipe_service
from src.models.user import User
from src.schemas.grocery import GroceryItemResponse
from src.schemas.ledger import DeletedResponse
from src.schemas.recipe import (
    AddToGroceryResponse,
    AvailabilityResponse,
    RecipeCreate,
    RecipeResponse,
    RecipeUpdate,
)
from src.services.recipe_service import RecipeService, RecipeWithAvailability

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


def to_availability_response(result: RecipeWithAvailability) -> RecipeResponse:
    """Build a recipe payload whose ingredients carry their availability."""
    response = RecipeResponse.model_validate(result.recipe)
    for ingredient, annotated in zip(response.ingredients, result.ingredients, strict=True):
        ingredient.availability = AvailabilityResponse.model_validate(annotated.availability)
    return response


@router.get("", response_model=list[RecipeResponse])
def list_recipes(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
    with_availability: bool = Query(default=False, description="Annotate ingredients"),
):
    """List recipes, most recently updated first."""
    if with_availability:
        return [
            to_availability_response(result)
            for result in service.list_with_availability(current_user.id)
        ]
    return [
        RecipeResponse.model_validate(recipe) for recipe in service.list_for_user(current_user.id)
    ]


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(
    recipe_data: RecipeCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Create a recipe, linking each ingredient to its pantry item."""
    return service.create(current_user.id, recipe_data.model_dump())


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(
    recipe_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
    with_availability: bool = Query(default=False, description="Annotate ingredients"),
):
    """Get a recipe, optionally annotated with ingredient availability."""
    if with_availability:
        return to_availability_response(service.get_with_availability(current_user.id, recipe_id))
    return RecipeResponse.model_validate(service.get(current_user.id, recipe_id))


@router.put("/{recipe_id}", response_model=RecipeResponse)
def update_recipe(
    recipe_id: int,
    recipe_data: RecipeUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Update a recipe; a new ingredient list replaces the old one."""
    return service.update(current_user.id, recipe_id, recipe_data.model_dump(exclude_unset=True))


@router.delete("/{recipe_id}", response_model=DeletedResponse)
def delete_recipe(
    recipe_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Delete a recipe."""
    recipe = service.delete(current_user.id, recipe_id)
    return DeletedResponse(id=recipe.id)


@router.post("/{recipe_id}/add-to-grocery", response_model=AddToGroceryResponse)
def add_recipe_to_grocery(
    recipe_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Add every ingredient of a recipe to the grocery list.

    Rows whose fridge link could not be released stay checked and are listed in
    ``sync_errors``; the rest of the recipe is still added.
    """
    result = service.add_ingredients_to_grocery(current_user.id, recipe_id)
    return AddToGroceryResponse(
        added_count=len(result.items),
        items=[GroceryItemResponse.model_validate(item) for item in result.items],
        synced=not result.sync_errors,
        sync_errors=result.sync_errors,
    )
