"""Admin user management endpoints."""

from fastapi import APIRouter, Depends, status

from sidak.application.schemas.user import UserCreate, UserResponse, UserUpdate
from sidak.application.services import UserService
from sidak.domain.entities import UserContext
from sidak.infrastructure.dependencies import get_current_context, get_user_service
from sidak.presentation.api.v1.endpoints.errors import DOMAIN_ERRORS, http_error

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    actor: UserContext = Depends(get_current_context),
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    try:
        users = await service.list_users(actor)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return [UserResponse.model_validate(u) for u in users]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    actor: UserContext = Depends(get_current_context),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = await service.create_user(actor, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    data: UserUpdate,
    actor: UserContext = Depends(get_current_context),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Update a user; a new password is re-hashed with a fresh salt."""
    try:
        user = await service.update_user(actor, user_id, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    actor: UserContext = Depends(get_current_context),
    service: UserService = Depends(get_user_service),
) -> None:
    try:
        await service.delete_user(actor, user_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
