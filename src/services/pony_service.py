"""Catalog service for pony CRUD and favorites."""

import logging

from src.exceptions import NotFoundError
from src.records import PonyRecord
from src.repositories.pony_repo import PonyRepository
from src.schemas.pony import PonyCreate, PonyUpdate

logger = logging.getLogger(__name__)


class PonyService:
    """Service for pony-related operations."""

    def __init__(self, repo: PonyRepository):
        self.repo = repo

    def create(self, data: PonyCreate) -> PonyRecord:
        pony = self.repo.create(data.model_dump())
        logger.info(f"Created pony {pony.id} ({pony.name})")
        return pony

    def list(self) -> list[PonyRecord]:
        """All ponies, ordered by name."""
        return self.repo.find_all()

    def get(self, pony_id: str) -> PonyRecord:
        pony = self.repo.find_by_id(pony_id)
        if pony is None:
            raise NotFoundError(f"Pony #{pony_id} not found")
        return pony

    def update(self, pony_id: str, data: PonyUpdate) -> PonyRecord:
        """Apply the fields present in ``data``; everything else is left as is."""
        changes = data.model_dump(exclude_unset=True)
        if not changes:
            return self.get(pony_id)

        pony = self.repo.update(pony_id, changes)
        if pony is None:
            raise NotFoundError(f"Pony #{pony_id} not found")
        return pony

    def set_favorite(self, pony_id: str, is_favorite: bool) -> PonyRecord:
        """Set the favorite flag. Repeating the call with the same value is a no-op."""
        pony = self.get(pony_id)
        if pony.is_favorite == is_favorite:
            return pony
        return self.update(pony_id, PonyUpdate(is_favorite=is_favorite))

    def remove(self, pony_id: str) -> None:
        if not self.repo.delete(pony_id):
            raise NotFoundError(f"Pony #{pony_id} not found")
        logger.info(f"Deleted pony {pony_id}")
