"""FastAPI dependencies for identity resolution and database."""

from typing import Annotated

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from ideaflow.config import get_settings
from ideaflow.database import get_db
from ideaflow.errors import AuthenticationRequired, ValidationError
from ideaflow.models.owner import Identity, Owner, Unidentified
from ideaflow.models.user import User
from ideaflow.services.auth import decode_access_token, get_user_by_id
from ideaflow.services.idea_service import IdeaService
from ideaflow.services.identity import resolve_identity

settings = get_settings()

# auto_error=False: a missing or malformed Authorization header is not an error here
security = HTTPBearer(auto_error=False)


def get_session_id(
    session_header: Annotated[str | None, Header(alias=settings.session_header_name)] = None,
) -> str | None:
    """Read the anonymous session token; blank counts as absent."""
    if session_header is None or not session_header.strip():
        return None
    session_id = session_header.strip()
    if len(session_id) > settings.session_id_max_length:
        raise ValidationError(
            f"Session ID must be at most {settings.session_id_max_length} characters"
        )
    return session_id


def get_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    session_id: Annotated[str | None, Depends(get_session_id)],
    db: Annotated[Session, Depends(get_db)],
) -> Identity:
    """Resolve the acting owner; never fails on a bad token."""
    token = credentials.credentials if credentials else None
    return resolve_identity(db, token, session_id)


def require_owner(identity: Annotated[Identity, Depends(get_identity)]) -> Owner:
    """Reject requests that carry neither a credential nor a session ID."""
    if isinstance(identity, Unidentified):
        raise AuthenticationRequired(
            "Session ID or bearer token required for anonymous access",
            status_code=400,
        )
    return identity


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the account behind the bearer token; the session header is not read."""
    account_id = decode_access_token(credentials.credentials) if credentials else None
    user = get_user_by_id(db, account_id) if account_id is not None else None
    if user is None:
        raise AuthenticationRequired(headers={"WWW-Authenticate": "Bearer"})
    return user


def get_idea_service(
    db: Annotated[Session, Depends(get_db)],
) -> IdeaService:
    """Get idea service with dependencies."""
    return IdeaService(db)
