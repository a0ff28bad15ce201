"""Repositories mapping between database rows and plain records."""

from src.repositories.pony_repo import PonyRepository, SqlAlchemyPonyRepository
from src.repositories.user_repo import SqlAlchemyUserRepository, UserRepository

__all__ = [
    "PonyRepository",
    "SqlAlchemyPonyRepository",
    "UserRepository",
    "SqlAlchemyUserRepository",
]
