"""
Pydantic schemas for the /api/auth endpoints.
"""

from uuid import UUID

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request body for POST /api/auth/register."""

    username: str = Field(..., min_length=1, max_length=50, examples=["alice"])
    email: str = Field(
        ...,
        max_length=255,
        pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
        examples=["alice@example.com"],
    )
    password: str = Field(..., min_length=6, max_length=128)


class LoginRequest(BaseModel):
    """Request body for POST /api/auth/login."""

    email: str
    password: str


class UserResponse(BaseModel):
    id: UUID
    username: str
    email: str

    model_config = {"from_attributes": True}


class TokenResponse(BaseModel):
    """Returned by both register and login."""

    token: str
    user: UserResponse
