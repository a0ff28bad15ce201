"""HTTP client for the pony catalog API.

Mirrors what the browser front end does without the UI: it keeps the access
token and current user after login, refuses protected calls while logged out,
and tracks ``loading``/``error`` state around every request.
"""

import logging
from pathlib import Path
from typing import Any

import httpx
from jose import JWTError, jwt

from src.services.uploads import (
    ALLOWED_IMAGE_TYPES,
    DEFAULT_MAX_UPLOAD_BYTES,
    normalize_content_type,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."


class ApiError(Exception):
    """Error response returned by the API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class ClientAuthError(Exception):
    """Raised when a protected call is attempted without a token."""


def validate_image_file(
    content_type: str | None, size: int, max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
) -> str | None:
    """Pre-check an image before uploading it.

    Returns an error message, or None when the file is acceptable. Uses the
    same types and size ceiling the server enforces.
    """
    if normalize_content_type(content_type) not in ALLOWED_IMAGE_TYPES:
        return "Please select an image file (jpg, jpeg, png, gif or webp)."
    if size > max_bytes:
        return f"The image must be at most {max_bytes // (1024 * 1024)}MB."
    return None


class PonyClient:
    """Synchronous client for the pony catalog API."""

    def __init__(self, base_url: str = "http://localhost:8000", http: httpx.Client | None = None):
        self.http = http or httpx.Client(base_url=base_url, timeout=30.0)
        self.token: str | None = None
        self.user: dict[str, Any] | None = None
        self.loading = False
        self.error: str | None = None

    # --- Session ---

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def login(self, email: str, password: str) -> dict[str, Any]:
        """Log in and keep the token plus the user decoded from its claims."""
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        token = data["access_token"]
        try:
            claims = jwt.get_unverified_claims(token)
        except JWTError as e:
            raise ApiError(401, "Received a malformed token") from e

        self.token = token
        self.user = {"id": claims["sub"], "email": claims["email"], "name": claims.get("name")}
        return {"access_token": token, "user": self.user}

    def logout(self) -> None:
        self.token = None
        self.user = None

    def register(self, name: str, email: str, password: str) -> dict[str, Any]:
        return self._request(
            "POST", "/users/register", json={"name": name, "email": email, "password": password}
        )

    def me(self) -> dict[str, Any]:
        return self._request("GET", "/users/me", auth=True)

    # --- Ponies ---

    def list_ponies(self) -> list[dict[str, Any]]:
        return self._request("GET", "/ponies", auth=True)

    def get_pony(self, pony_id: str) -> dict[str, Any]:
        return self._request("GET", f"/ponies/{pony_id}", auth=True)

    def create_pony(self, pony: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/ponies", json=pony, auth=True)

    def update_pony(self, pony_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        return self._request("PUT", f"/ponies/{pony_id}", json=changes, auth=True)

    def set_favorite(self, pony_id: str, is_favorite: bool) -> dict[str, Any]:
        method = "PUT" if is_favorite else "DELETE"
        return self._request(method, f"/ponies/{pony_id}/favorite", auth=True)

    def delete_pony(self, pony_id: str) -> None:
        self._request("DELETE", f"/ponies/{pony_id}", auth=True)

    def upload_image(
        self,
        content: bytes,
        filename: str,
        content_type: str,
    ) -> str:
        """Upload image bytes and return the stored image URL."""
        problem = validate_image_file(content_type, len(content))
        if problem:
            self.error = problem
            raise ValueError(problem)

        files = {"file": (filename, content, content_type)}
        data = self._request("POST", "/ponies/upload", files=files, auth=True)
        return data["imageUrl"]

    def upload_image_file(self, path: str | Path, content_type: str) -> str:
        path = Path(path)
        return self.upload_image(path.read_bytes(), path.name, content_type)

    # --- Transport ---

    def _request(self, method: str, url: str, auth: bool = False, **kwargs) -> Any:
        headers = {}
        if auth:
            if self.token is None:
                raise ClientAuthError("Login required")
            headers["Authorization"] = f"Bearer {self.token}"

        self.loading = True
        self.error = None
        try:
            response = self.http.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            self.error = GENERIC_ERROR_MESSAGE
            raise
        finally:
            self.loading = False

        if response.is_error:
            message = _error_message(response)
            self.error = message
            if response.status_code == 401 and auth:
                # Token expired or was rejected; behave as logged out
                self.logout()
            raise ApiError(response.status_code, message)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return GENERIC_ERROR_MESSAGE
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return GENERIC_ERROR_MESSAGE
