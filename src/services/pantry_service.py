"""Pantry resolver: maps free-text item names onto canonical pantry identities."""

import logging

from src.config import get_settings
from src.models.pantry import PantryItem
from src.repositories.pantry import PantryRepository
from src.services.exceptions import ConflictRetry, InvalidInput, InventoryError
from src.services.name_key import clean_text, make_name_key

logger = logging.getLogger(__name__)


class PantryService:
    """Service for resolving and listing pantry identities."""

    def __init__(self, repository: PantryRepository, max_attempts: int | None = None):
        self.repository = repository
        self.max_attempts = max_attempts or get_settings().pantry_resolve_attempts

    def list_for_user(self, user_id: int) -> list[PantryItem]:
        return self.repository.list_for_user(user_id)

    def resolve(
        self,
        user_id: int,
        name: str | None,
        brand: str | None = None,
        label: str | None = None,
        default_unit: str | None = None,
    ) -> PantryItem:
        """Return the pantry item for (user, name key, brand), creating it if absent.

        An existing identity is returned untouched: label and unit hints only
        apply when the identity is first created, and its brand is part of the
        identity itself.

        Two requests may race to create the same identity. The store's unique
        constraint lets only one insert through; the loser sees ConflictRetry
        and picks up the winner's row on the next lookup.
        """
        name_key = make_name_key(name)
        if not name_key:
            raise InvalidInput("Name is required")
        clean_brand = clean_text(brand)
        last_conflict: ConflictRetry | None = None

        for attempt in range(1, self.max_attempts + 1):
            existing = self.repository.find_by_identity(user_id, name_key, clean_brand)
            if existing:
                return existing

            item = PantryItem(
                user_id=user_id,
                name=name.strip(),
                name_key=name_key,
                brand=clean_brand,
                brand_key=clean_brand or "",
                label=clean_text(label),
                default_unit=clean_text(default_unit),
            )
            try:
                created = self.repository.insert(item)
            except ConflictRetry as exc:
                last_conflict = exc
                logger.warning(
                    f"Pantry item '{name_key}' (brand={clean_brand!r}) for user {user_id} "
                    f"was rejected by the store ({exc}), re-fetching (attempt {attempt})"
                )
                continue

            logger.info(f"Created pantry item {created.id}: '{name_key}' (brand={clean_brand!r})")
            return created

        raise InventoryError(
            f"Could not resolve pantry item '{name_key}' after {self.max_attempts} attempts"
        ) from last_conflict
