"""Ownership as a tagged union.

An idea belongs to exactly one owner: a registered account or an anonymous
session. Storage lowers this to the nullable pair ``(user_id, session_id)``;
everything above the model layer works with these variants instead.
"""

from dataclasses import dataclass


class InvalidOwnership(ValueError):
    """Raised when a record would carry both owners or neither."""


@dataclass(frozen=True)
class AccountOwner:
    """Owner identified by a verified account credential."""

    account_id: int


@dataclass(frozen=True)
class SessionOwner:
    """Owner identified only by a client-generated session token."""

    session_id: str


@dataclass(frozen=True)
class Unidentified:
    """Neither a usable credential nor a session token was presented."""


Owner = AccountOwner | SessionOwner
Identity = AccountOwner | SessionOwner | Unidentified


def lower_owner(owner: Owner) -> tuple[int | None, str | None]:
    """Return the ``(user_id, session_id)`` column pair for an owner."""
    if isinstance(owner, AccountOwner):
        return owner.account_id, None
    if isinstance(owner, SessionOwner):
        return None, owner.session_id
    raise InvalidOwnership(f"Cannot store ideas for {owner!r}")


def raise_owner(user_id: int | None, session_id: str | None) -> Owner:
    """Rebuild the owner variant from stored columns, enforcing XOR."""
    if user_id is not None and session_id is None:
        return AccountOwner(user_id)
    if user_id is None and session_id is not None:
        return SessionOwner(session_id)
    raise InvalidOwnership(
        f"Idea must have exactly one owner (user_id={user_id!r}, session_id={session_id!r})"
    )
