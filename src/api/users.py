"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_auth_service, get_current_user
from src.records import AuthUser
from src.schemas.auth import RegisteredUserResponse, UserRegister, UserResponse
from src.schemas.error import ErrorResponse
from src.services.auth import AuthService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/register",
    response_model=RegisteredUserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
def register(
    user_data: UserRegister,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    return auth_service.register(user_data)


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: Annotated[AuthUser, Depends(get_current_user)],
):
    """Get the authenticated user's id, email and name from their token."""
    return current_user
