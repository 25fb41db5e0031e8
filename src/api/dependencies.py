"""FastAPI dependencies for authentication and service wiring."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.models.user import User
from src.repositories import FridgeRepository, GroceryRepository, PantryRepository, RecipeRepository
from src.services.auth import decode_user_id
from src.services.fridge_service import FridgeService
from src.services.grocery_service import GroceryService
from src.services.pantry_service import PantryService
from src.services.recipe_service import RecipeService
from src.services.sync_service import GrocerySyncService

security = HTTPBearer()


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current user from the bearer token issued upstream."""
    user_id = decode_user_id(credentials.credentials)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


def get_pantry_service(
    db: Annotated[Session, Depends(get_db)],
) -> PantryService:
    """Get pantry resolver."""
    return PantryService(PantryRepository(db))


def get_fridge_service(
    db: Annotated[Session, Depends(get_db)],
    pantry_service: Annotated[PantryService, Depends(get_pantry_service)],
) -> FridgeService:
    """Get fridge service with dependencies."""
    return FridgeService(pantry_service, FridgeRepository(db))


def get_grocery_service(
    db: Annotated[Session, Depends(get_db)],
    pantry_service: Annotated[PantryService, Depends(get_pantry_service)],
    fridge_service: Annotated[FridgeService, Depends(get_fridge_service)],
) -> GroceryService:
    """Get grocery service wired to fridge sync."""
    return GroceryService(pantry_service, GroceryRepository(db), GrocerySyncService(fridge_service))


def get_recipe_service(
    db: Annotated[Session, Depends(get_db)],
    pantry_service: Annotated[PantryService, Depends(get_pantry_service)],
    grocery_service: Annotated[GroceryService, Depends(get_grocery_service)],
) -> RecipeService:
    """Get recipe service with dependencies."""
    return RecipeService(pantry_service, RecipeRepository(db), grocery_service, FridgeRepository(db))
