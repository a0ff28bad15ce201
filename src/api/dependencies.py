"""FastAPI dependencies for authentication, database and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.exceptions import AuthenticationError
from src.records import AuthUser
from src.repositories.pony_repo import SqlAlchemyPonyRepository
from src.repositories.user_repo import SqlAlchemyUserRepository
from src.services.auth import AuthService, decode_access_token
from src.services.pony_service import PonyService
from src.services.uploads import ImageStorage

# auto_error=False so a missing header goes through the same 401 path as a bad token
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> AuthUser:
    """Get the current authenticated user from the JWT token.

    Only the token is consulted; its claims are trusted once the signature and
    expiry check out.
    """
    if credentials is None:
        raise AuthenticationError("Not authenticated")

    return decode_access_token(credentials.credentials)


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(SqlAlchemyUserRepository(db))


def get_pony_service(
    db: Annotated[Session, Depends(get_db)],
) -> PonyService:
    """Get pony service with dependencies."""
    return PonyService(SqlAlchemyPonyRepository(db))


def get_image_storage() -> ImageStorage:
    """Get image storage configured from settings."""
    settings = get_settings()
    return ImageStorage(
        settings.upload_dir,
        settings.public_base_url,
        max_bytes=settings.upload_max_bytes,
    )
