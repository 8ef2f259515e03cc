"""Idea schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class IdeaCreate(BaseModel):
    """Create a new idea.

    Length and blankness are validated by IdeaService, not here, so that
    whitespace-only content gets the same error as empty content.
    """

    content: str


class IdeaResponse(BaseModel):
    """Idea response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    user_id: int | None
    session_id: str | None
    created_at: datetime
    updated_at: datetime
