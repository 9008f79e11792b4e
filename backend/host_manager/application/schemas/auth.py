"""Pydantic DTOs for admin authentication."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class CredentialsUpdate(BaseModel):
    """Change the admin login. The current password must be supplied."""

    current_password: str = Field(..., min_length=1)
    new_username: str = Field(..., min_length=1, max_length=100)
    new_password: str = Field(..., min_length=8, max_length=72)
