"""User persistence."""

from typing import Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.exceptions import ConflictError
from src.models.user import User
from src.records import UserRecord


class UserRepository(Protocol):
    def create(self, name: str, email: str, password_hash: str) -> UserRecord: ...

    def find_by_email(self, email: str) -> UserRecord | None: ...

    def find_by_id(self, user_id: str) -> UserRecord | None: ...


def _to_record(user: User) -> UserRecord:
    return UserRecord(
        id=user.id,
        name=user.name,
        email=user.email,
        password_hash=user.password_hash,
        created_at=user.created_at,
    )


class SqlAlchemyUserRepository:
    """UserRepository backed by the ``users`` table."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, name: str, email: str, password_hash: str) -> UserRecord:
        user = User(name=name, email=email, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError("Email already registered") from e
        self.db.refresh(user)
        return _to_record(user)

    def find_by_email(self, email: str) -> UserRecord | None:
        user = self.db.query(User).filter(User.email == email).first()
        return _to_record(user) if user else None

    def find_by_id(self, user_id: str) -> UserRecord | None:
        user = self.db.get(User, user_id)
        return _to_record(user) if user else None
