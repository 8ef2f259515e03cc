"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from jose.utils import base64url_decode, base64url_encode
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ideaflow.config import get_settings
from ideaflow.errors import Conflict, InvalidCredentials, ValidationError
from ideaflow.models.user import User
from ideaflow.services.migration import migrate_session_ideas

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, expires_delta: timedelta | None = None) -> str:
    """Create a signed JWT carrying the account id and an absolute expiry."""
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(days=settings.jwt_expiration_days))
    to_encode = {
        "sub": str(user_id),
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> int | None:
    """Return the account id of a valid token, or None.

    Malformed tokens, bad signatures and expired tokens all give None;
    callers are not told which.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None

    if not _has_canonical_signature(token):
        return None

    sub = payload.get("sub")
    try:
        return int(sub)
    except (TypeError, ValueError):
        return None


def _has_canonical_signature(token: str) -> bool:
    """Reject signatures whose unused trailing base64 bits were altered.

    jose decodes such a segment to the same bytes and accepts it, so a
    token could be changed without breaking the HMAC.
    """
    signature = token.rsplit(".", 1)[-1].encode("ascii")
    return base64url_encode(base64url_decode(signature)) == signature


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: int) -> User | None:
    """Get a user by id."""
    return db.get(User, user_id)


def create_user(db: Session, email: str, password: str) -> User:
    """Create a new user, raising Conflict if the email is taken."""
    if get_user_by_email(db, email):
        raise Conflict("User already exists with this email")

    user = User(email=email, password_hash=get_password_hash(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        raise Conflict("User already exists with this email") from None
    db.refresh(user)
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        logger.info("Failed login attempt")
        raise InvalidCredentials()
    return user


def _require_credentials(email: str, password: str) -> None:
    if not email or not email.strip() or not password:
        raise ValidationError("Email and password are required")


def register_account(
    db: Session, email: str, password: str, session_id: str | None = None
) -> tuple[User, str]:
    """Create an account, adopt the session's ideas, and issue a token."""
    _require_credentials(email, password)
    if len(password) < settings.password_min_length:
        raise ValidationError(
            f"Password must be at least {settings.password_min_length} characters"
        )

    user = create_user(db, email, password)
    logger.info(f"Registered account {user.id}")

    if session_id:
        migrate_session_ideas(db, session_id, user.id)

    return user, create_access_token(user.id)


def login_account(
    db: Session, email: str, password: str, session_id: str | None = None
) -> tuple[User, str]:
    """Verify credentials, adopt the session's ideas, and issue a token."""
    _require_credentials(email, password)
    user = authenticate_user(db, email, password)
    logger.info(f"Account {user.id} logged in")

    if session_id:
        migrate_session_ideas(db, session_id, user.id)

    return user, create_access_token(user.id)
