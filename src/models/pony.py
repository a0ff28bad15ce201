"""Pony model."""

from sqlalchemy import Boolean, Column, String, Text, false

from src.database import Base
from src.models.mixins import CreatedAtMixin, UUIDPrimaryKeyMixin


class Pony(Base, UUIDPrimaryKeyMixin, CreatedAtMixin):
    """A catalog entry with descriptive attributes and an image."""

    __tablename__ = "ponies"

    name = Column(String(255), nullable=False, index=True)
    element = Column(String(255), nullable=False)
    personality = Column(String(255), nullable=False)
    talent = Column(String(255), nullable=False)
    summary = Column(Text, nullable=False)
    image_url = Column(String(2048), nullable=False)
    is_favorite = Column(Boolean, nullable=False, default=False, server_default=false())
