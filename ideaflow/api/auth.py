"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ideaflow.api.dependencies import get_current_user, get_session_id
from ideaflow.database import get_db
from ideaflow.models.user import User
from ideaflow.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from ideaflow.services.auth import login_account, register_account

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
    session_id: Annotated[str | None, Depends(get_session_id)],
):
    """Register a new user and adopt the caller's anonymous ideas."""
    user, token = register_account(db, user_data.email, user_data.password, session_id)

    return AuthResponse(
        message="User created successfully",
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
    session_id: Annotated[str | None, Depends(get_session_id)],
):
    """Login with email and password."""
    user, token = login_account(db, credentials.email, credentials.password, session_id)

    return AuthResponse(
        message="Login successful",
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.get("/profile", response_model=UserResponse)
def get_profile(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user
