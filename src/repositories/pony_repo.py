"""Pony persistence."""

from typing import Any, Protocol

from sqlalchemy import func
from sqlalchemy.orm import Session

from src.models.pony import Pony
from src.records import PonyRecord


class PonyRepository(Protocol):
    def create(self, fields: dict[str, Any]) -> PonyRecord: ...

    def find_all(self) -> list[PonyRecord]: ...

    def find_by_id(self, pony_id: str) -> PonyRecord | None: ...

    def update(self, pony_id: str, fields: dict[str, Any]) -> PonyRecord | None: ...

    def delete(self, pony_id: str) -> bool: ...


def _to_record(pony: Pony) -> PonyRecord:
    return PonyRecord(
        id=pony.id,
        name=pony.name,
        element=pony.element,
        personality=pony.personality,
        talent=pony.talent,
        summary=pony.summary,
        image_url=pony.image_url,
        is_favorite=pony.is_favorite,
        created_at=pony.created_at,
    )


class SqlAlchemyPonyRepository:
    """PonyRepository backed by the ``ponies`` table.

    ``update`` and ``delete`` return ``None``/``False`` for unknown ids and
    leave the decision of how to report that to the caller.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, fields: dict[str, Any]) -> PonyRecord:
        pony = Pony(**fields)
        self.db.add(pony)
        self.db.commit()
        self.db.refresh(pony)
        return _to_record(pony)

    def find_all(self) -> list[PonyRecord]:
        ponies = (
            self.db.query(Pony)
            .order_by(func.lower(Pony.name).asc(), Pony.name.asc(), Pony.created_at.asc())
            .all()
        )
        return [_to_record(pony) for pony in ponies]

    def find_by_id(self, pony_id: str) -> PonyRecord | None:
        pony = self.db.get(Pony, pony_id)
        return _to_record(pony) if pony else None

    def update(self, pony_id: str, fields: dict[str, Any]) -> PonyRecord | None:
        pony = self.db.get(Pony, pony_id)
        if pony is None:
            return None

        for field, value in fields.items():
            setattr(pony, field, value)

        self.db.commit()
        self.db.refresh(pony)
        return _to_record(pony)

    def delete(self, pony_id: str) -> bool:
        pony = self.db.get(Pony, pony_id)
        if pony is None:
            return False

        self.db.delete(pony)
        self.db.commit()
        return True
