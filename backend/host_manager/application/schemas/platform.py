"""Pydantic DTOs (Data Transfer Objects) for the Platform feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class PlatformCreate(BaseModel):
    """Schema for creating a new platform."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Hostcode"])


class PlatformUpdate(BaseModel):
    """Schema for updating an existing platform."""

    name: str | None = Field(None, min_length=1, max_length=255)


class PlatformResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    created_at: datetime

    model_config = {"from_attributes": True}
