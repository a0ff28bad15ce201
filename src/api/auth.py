"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_auth_service, get_current_user
from src.records import AuthUser
from src.schemas.auth import AuthResponse, UserLogin, UserResponse
from src.schemas.error import ErrorResponse
from src.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={401: {"model": ErrorResponse}},
)
def login(
    credentials: UserLogin,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    access_token, user = auth_service.login(credentials.email, credentials.password)

    return AuthResponse(
        access_token=access_token,
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: Annotated[AuthUser, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user
