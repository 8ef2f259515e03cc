"""Idea API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from ideaflow.api.dependencies import get_idea_service, require_owner
from ideaflow.errors import NotFoundOrForbidden
from ideaflow.models.owner import Owner
from ideaflow.schemas.auth import MessageResponse
from ideaflow.schemas.idea import IdeaCreate, IdeaResponse
from ideaflow.services.idea_service import IdeaService

router = APIRouter(prefix="/api/ideas", tags=["ideas"])


@router.get("", response_model=list[IdeaResponse])
def get_ideas(
    owner: Annotated[Owner, Depends(require_owner)],
    service: Annotated[IdeaService, Depends(get_idea_service)],
):
    """Get all ideas for the current account or session."""
    return service.list(owner)


@router.post("", response_model=IdeaResponse, status_code=status.HTTP_201_CREATED)
def create_idea(
    idea_data: IdeaCreate,
    owner: Annotated[Owner, Depends(require_owner)],
    service: Annotated[IdeaService, Depends(get_idea_service)],
):
    """Create a new idea."""
    return service.create(idea_data.content, owner)


@router.delete("/{idea_id}", response_model=MessageResponse)
def delete_idea(
    idea_id: int,
    owner: Annotated[Owner, Depends(require_owner)],
    service: Annotated[IdeaService, Depends(get_idea_service)],
):
    """Delete an idea owned by the caller."""
    if not service.delete(idea_id, owner):
        raise NotFoundOrForbidden("Idea not found or access denied")
    return MessageResponse(message="Idea deleted successfully")
