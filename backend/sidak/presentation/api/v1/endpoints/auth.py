"""Login, current-user and password change endpoints."""

from fastapi import APIRouter, Depends, status

from sidak.application.schemas.auth import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    UserProfile,
)
from sidak.application.services import AuthService
from sidak.domain.entities import Role, User
from sidak.infrastructure.dependencies import get_auth_service, get_current_user
from sidak.presentation.api.v1.endpoints.errors import DOMAIN_ERRORS, http_error

router = APIRouter(prefix="/auth", tags=["Auth"])


def _profile(user: User) -> UserProfile:
    return UserProfile(
        username=user.username,
        role=user.role,
        email=user.email,
        allowed_units=list(user.allowed_units) if user.role != Role.ADMIN.value else None,
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Exchange username/password for a bearer token valid for 24 hours."""
    try:
        token, user = await service.login(body.username, body.password)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return LoginResponse(token=token, user=_profile(user))


@router.get("/me", response_model=UserProfile)
async def me(user: User = Depends(get_current_user)) -> UserProfile:
    return _profile(user)


@router.post("/change-password", status_code=status.HTTP_204_NO_CONTENT)
async def change_password(
    body: ChangePasswordRequest,
    user: User = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
) -> None:
    try:
        await service.change_own_password(user, body.old_password, body.new_password)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
