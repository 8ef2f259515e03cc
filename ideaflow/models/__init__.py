"""SQLAlchemy models."""

from ideaflow.models.idea import Idea
from ideaflow.models.user import User

__all__ = [
    "User",
    "Idea",
]
