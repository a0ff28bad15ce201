"""Application error types.

Services raise these; the handlers registered in ``src.main`` turn them into
``{"statusCode": ..., "message": ...}`` JSON responses.
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Missing or malformed input, including rejected uploads."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(AppError):
    """Bad credentials or a missing, invalid or expired token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    """A unique field already holds the submitted value."""

    status_code = status.HTTP_409_CONFLICT
