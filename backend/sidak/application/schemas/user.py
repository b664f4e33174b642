"""Pydantic DTOs for admin user management."""

from datetime import datetime

from pydantic import Field

from sidak.application.schemas.base import CamelModel
from sidak.domain.entities import Role


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=100, examples=["operator1"])
    email: str = Field(..., min_length=3, max_length=255, examples=["operator1@sidak.kelurahan.id"])
    password: str = Field(..., min_length=6)
    role: Role
    allowed_units: list[str] = Field(default_factory=list)


class UserUpdate(CamelModel):
    """Schema for updating a user: all fields optional."""

    username: str | None = Field(None, min_length=1, max_length=100)
    email: str | None = Field(None, min_length=3, max_length=255)
    password: str | None = Field(None, min_length=6)
    role: Role | None = None
    allowed_units: list[str] | None = None
    is_active: bool | None = None


class UserResponse(CamelModel):
    id: str
    username: str
    email: str
    role: str
    allowed_units: list[str]
    is_active: bool
    created_at: datetime

    model_config = {"from_attributes": True}
