"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from src.config import get_settings
from src.exceptions import AuthenticationError, ConflictError
from src.records import AuthUser, UserRecord
from src.repositories.user_repo import UserRepository
from src.schemas.auth import MAX_PASSWORD_BYTES, UserRegister

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)

INVALID_CREDENTIALS = "Incorrect email or password"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    bcrypt ignores everything past 72 bytes, so longer input never matches.
    """
    if len(plain_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user: UserRecord | AuthUser, issued_at: datetime | None = None) -> str:
    """Create a JWT access token for a user.

    The token carries the user's id as ``sub`` along with email and name, so
    requests can be authenticated without a database lookup.
    """
    issued_at = issued_at or datetime.now(UTC)
    expire = issued_at + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user.id),
        "email": user.email,
        "name": user.name,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> AuthUser:
    """Decode and validate a JWT token.

    Raises:
        AuthenticationError: if the signature is wrong, the token is expired or
            malformed, or required claims are missing.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise AuthenticationError("Invalid or expired token") from e

    user_id = payload.get("sub")
    email = payload.get("email")
    if not user_id or not email:
        raise AuthenticationError("Token missing sub/email")

    return AuthUser(id=user_id, email=email, name=payload.get("name") or "")


class AuthService:
    """Registration, login and token verification."""

    def __init__(self, users: UserRepository):
        self.users = users

    def register(self, data: UserRegister) -> UserRecord:
        """Register a new user, storing only a hash of the password."""
        if self.users.find_by_email(data.email):
            raise ConflictError("Email already registered")

        user = self.users.create(
            name=data.name,
            email=data.email,
            password_hash=get_password_hash(data.password),
        )
        logger.info(f"Registered user {user.id}")
        return user

    def login(self, email: str, password: str) -> tuple[str, UserRecord]:
        """Check credentials and mint an access token."""
        user = self.users.find_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Rejected login attempt")
            raise AuthenticationError(INVALID_CREDENTIALS)

        return create_access_token(user), user

    def authenticate(self, token: str) -> AuthUser:
        """Verify a bearer token and return the identity it carries."""
        return decode_access_token(token)
