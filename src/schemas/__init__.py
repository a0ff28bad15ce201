"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import (
    AuthResponse,
    RegisteredUserResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from src.schemas.error import ErrorResponse
from src.schemas.pony import PonyCreate, PonyResponse, PonySummary, PonyUpdate, UploadResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "RegisteredUserResponse",
    "AuthResponse",
    "ErrorResponse",
    "PonyCreate",
    "PonyUpdate",
    "PonyResponse",
    "PonySummary",
    "UploadResponse",
]
