"""Plain data records passed between repositories, services and routers."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class UserRecord:
    id: str
    name: str
    email: str
    password_hash: str = field(repr=False)
    created_at: datetime


@dataclass(frozen=True)
class PonyRecord:
    id: str
    name: str
    element: str
    personality: str
    talent: str
    summary: str
    image_url: str
    is_favorite: bool
    created_at: datetime


@dataclass(frozen=True)
class AuthUser:
    """Identity decoded from a verified access token."""

    id: str
    email: str
    name: str
