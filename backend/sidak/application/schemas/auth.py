"""Pydantic DTOs for login and session handling."""

from pydantic import Field

from sidak.application.schemas.base import CamelModel


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)


class UserProfile(CamelModel):
    """The logged-in user as the frontend sees it.

    ``allowed_units`` is only sent for editors and viewers.
    """

    username: str
    role: str
    email: str
    allowed_units: list[str] | None = None


class LoginResponse(CamelModel):
    token: str
    user: UserProfile


class ChangePasswordRequest(CamelModel):
    old_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6)
