"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegister(BaseModel):
    """User registration request.

    Password strength is checked by the auth service so the minimum length
    follows settings.
    """

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    message: str
    token: str
    user: UserResponse


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
