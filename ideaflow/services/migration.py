"""Session-to-account migration of anonymous ideas."""

import logging

from sqlalchemy import update
from sqlalchemy.orm import Session

from ideaflow.models.idea import Idea

logger = logging.getLogger(__name__)


def migrate_session_ideas(db: Session, session_id: str, account_id: int) -> int:
    """Reassign every idea owned by ``session_id`` to ``account_id``.

    One conditional UPDATE: rows already owned by an account are untouched,
    and moved rows get their session reference cleared in the same
    statement, so the exactly-one-owner rule holds row by row. Returns the
    number of rows moved; 0 is a normal result.

    No lock is taken. Two logins racing on the same session token against
    different accounts can each move part of the set, depending on how the
    store interleaves the statements. The session token is a client-local
    convenience rather than a security boundary, and that outcome is kept.
    """
    stmt = (
        update(Idea)
        .where(Idea.session_id == session_id, Idea.user_id.is_(None))
        .values(user_id=account_id, session_id=None)
        .execution_options(synchronize_session=False)
    )
    result = db.execute(stmt)
    db.commit()

    moved = result.rowcount or 0
    logger.info(f"Migrated {moved} session ideas to account {account_id}")
    return moved
