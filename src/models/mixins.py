"""Mixins for SQLAlchemy models."""

import uuid

from sqlalchemy import Column, DateTime, String, func


def generate_id() -> str:
    """Return a new random UUID4 string for use as a primary key."""
    return str(uuid.uuid4())


class UUIDPrimaryKeyMixin:
    """Mixin adding a string UUID primary key generated on insert."""

    id = Column(String(36), primary_key=True, default=generate_id)


class CreatedAtMixin:
    """Mixin to add a created_at column set once by the database."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
