"""Request identity resolution.

Every request is attributed to an account (valid bearer token), a session
(``X-Session-ID`` header) or nobody. A bearer token that fails validation
does NOT reject the request: it is treated exactly like a missing token and
resolution falls back to the session. Callers must not read an anonymous
identity as proof that no token was sent.
"""

from sqlalchemy.orm import Session

from ideaflow.models.owner import AccountOwner, Identity, SessionOwner, Unidentified
from ideaflow.services.auth import decode_access_token, get_user_by_id


def resolve_identity(
    db: Session, bearer_token: str | None, session_id: str | None
) -> Identity:
    """Determine the acting owner for a request."""
    if bearer_token:
        account_id = decode_access_token(bearer_token)
        # Tokens for deleted accounts fall back like any other bad token
        if account_id is not None and get_user_by_id(db, account_id) is not None:
            return AccountOwner(account_id)

    if session_id:
        return SessionOwner(session_id)

    return Unidentified()
