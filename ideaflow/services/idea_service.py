"""Owner-scoped idea storage."""

import logging

from sqlalchemy import delete
from sqlalchemy.orm import Session

from ideaflow.config import get_settings
from ideaflow.errors import ValidationError
from ideaflow.models.idea import Idea
from ideaflow.models.owner import Owner

logger = logging.getLogger(__name__)


class IdeaService:
    """Create, list and delete ideas on behalf of a single owner."""

    def __init__(self, db: Session):
        self.db = db
        self.max_length = get_settings().idea_max_length

    def validate_content(self, content: str | None) -> str:
        """Return trimmed content or raise ValidationError."""
        if content is None or not content.strip():
            raise ValidationError("Content is required")
        if len(content) > self.max_length:
            raise ValidationError(f"Content must be at most {self.max_length} characters")
        return content.strip()

    def create(self, content: str | None, owner: Owner) -> Idea:
        """Store a new idea for ``owner``."""
        idea = Idea(content=self.validate_content(content))
        idea.owner = owner
        self.db.add(idea)
        self.db.commit()
        self.db.refresh(idea)
        return idea

    def list(self, owner: Owner) -> list[Idea]:
        """Return the owner's ideas, newest first."""
        return (
            self.db.query(Idea)
            .filter(Idea.owned_by(owner))
            .order_by(Idea.created_at.desc(), Idea.id.desc())
            .all()
        )

    def delete(self, idea_id: int, owner: Owner) -> bool:
        """Delete an idea if ``owner`` owns it.

        A missing id and an id owned by someone else both return False.
        """
        result = self.db.execute(
            delete(Idea)
            .where(Idea.id == idea_id, Idea.owned_by(owner))
            .execution_options(synchronize_session=False)
        )
        self.db.commit()

        if not result.rowcount:
            logger.debug(f"Delete of idea {idea_id} matched nothing for {owner!r}")
            return False
        return True
