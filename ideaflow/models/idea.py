"""Idea model."""

from sqlalchemy import Column, ForeignKey, Index, Integer, String, Text, event
from sqlalchemy.orm import relationship
from sqlalchemy.sql.elements import ColumnElement

from ideaflow.database import Base
from ideaflow.models.mixins import TimestampMixin
from ideaflow.models.owner import AccountOwner, Owner, lower_owner, raise_owner


class Idea(Base, TimestampMixin):
    """A short piece of text owned by either an account or a session.

    The schema allows any combination of ``user_id`` and ``session_id``; the
    exactly-one-owner rule is enforced by the flush hook below.
    """

    __tablename__ = "ideas"
    __table_args__ = (Index("ix_ideas_created_at", "created_at"),)

    id = Column(Integer, primary_key=True, index=True)
    content = Column(Text, nullable=False)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True
    )
    session_id = Column(String(255), nullable=True, index=True)

    # Relationships
    user = relationship("User", back_populates="ideas")

    @property
    def owner(self) -> Owner:
        return raise_owner(self.user_id, self.session_id)

    @owner.setter
    def owner(self, owner: Owner) -> None:
        self.user_id, self.session_id = lower_owner(owner)

    @classmethod
    def owned_by(cls, owner: Owner) -> ColumnElement[bool]:
        """SQL criterion matching rows whose owner is exactly ``owner``."""
        if isinstance(owner, AccountOwner):
            return cls.user_id == owner.account_id
        _, session_id = lower_owner(owner)
        return (cls.session_id == session_id) & cls.user_id.is_(None)


@event.listens_for(Idea, "before_insert")
@event.listens_for(Idea, "before_update")
def _check_single_owner(mapper, connection, target: Idea) -> None:
    raise_owner(target.user_id, target.session_id)
