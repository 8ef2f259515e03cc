"""User (account) model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from ideaflow.database import Base
from ideaflow.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """Registered account. Owns the ideas whose ``user_id`` points here."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # Relationships
    ideas = relationship("Idea", back_populates="user", passive_deletes=True)
