"""Pydantic schemas for request/response validation."""

from ideaflow.schemas.auth import (
    AuthResponse,
    MessageResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from ideaflow.schemas.idea import IdeaCreate, IdeaResponse

__all__ = [
    "AuthResponse",
    "MessageResponse",
    "UserLogin",
    "UserRegister",
    "UserResponse",
    "IdeaCreate",
    "IdeaResponse",
]
