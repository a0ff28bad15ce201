"""SQLAlchemy models."""

from src.models.pony import Pony
from src.models.user import User

__all__ = [
    "User",
    "Pony",
]
