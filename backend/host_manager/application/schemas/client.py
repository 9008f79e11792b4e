"""Pydantic DTOs (Data Transfer Objects) for the Client feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class ClientCreate(BaseModel):
    """Schema for creating a new client."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Client One"])
    ip_address: str = Field("", max_length=45, examples=["192.168.1.1"])
    platform: str = Field("", max_length=36, description="Platform id, empty for none")


class ClientUpdate(BaseModel):
    """Schema for updating an existing client — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    ip_address: str | None = Field(None, max_length=45)
    platform: str | None = Field(None, max_length=36)


class ClientResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    ip_address: str
    platform: str
    created_at: datetime

    model_config = {"from_attributes": True}
