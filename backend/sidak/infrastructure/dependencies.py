"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from sidak.config import get_settings
from sidak.application.services import (
    AssetService,
    AuthService,
    DashboardService,
    MasterDataService,
    UserService,
)
from sidak.application.services.access_policy import AccessPolicyConfig
from sidak.domain.entities import User, UserContext
from sidak.domain.exceptions import AuthenticationError
from sidak.infrastructure.database.session import get_db_session
from sidak.infrastructure.database.repositories import (
    SQLAlchemyAssetRepository,
    SQLAlchemyMasterDataRepository,
    SQLAlchemyUserRepository,
)
from sidak.infrastructure.security import TokenSigner

_bearer = HTTPBearer(auto_error=False)


@lru_cache
def get_token_signer() -> TokenSigner:
    """Singleton token signer built from the auth settings."""
    settings = get_settings()
    return TokenSigner(
        settings.auth_secret_key,
        ttl_seconds=settings.auth_token_ttl_hours * 3600,
    )


def get_access_policy() -> AccessPolicyConfig:
    settings = get_settings()
    return AccessPolicyConfig(unscoped_access=settings.policy_unscoped_access)


async def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    signer: TokenSigner = Depends(get_token_signer),
) -> AsyncGenerator[AuthService, None]:
    """Provides an AuthService backed by the user repository."""
    yield AuthService(SQLAlchemyUserRepository(session), signer)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """Resolve the ``Authorization: Bearer`` token to the signed-in user."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return await auth_service.authenticate(credentials.credentials)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_current_context(user: User = Depends(get_current_user)) -> UserContext:
    """The caller as seen by the access policy."""
    return user.to_context()


async def get_asset_service(
    session: AsyncSession = Depends(get_db_session),
    policy: AccessPolicyConfig = Depends(get_access_policy),
) -> AsyncGenerator[AssetService, None]:
    """Provides an AssetService with asset and master data repositories wired up."""
    yield AssetService(
        SQLAlchemyAssetRepository(session),
        SQLAlchemyMasterDataRepository(session),
        policy=policy,
    )


async def get_dashboard_service(
    session: AsyncSession = Depends(get_db_session),
    policy: AccessPolicyConfig = Depends(get_access_policy),
) -> AsyncGenerator[DashboardService, None]:
    yield DashboardService(SQLAlchemyAssetRepository(session), policy=policy)


async def get_user_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UserService, None]:
    yield UserService(SQLAlchemyUserRepository(session))


async def get_master_data_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[MasterDataService, None]:
    yield MasterDataService(SQLAlchemyMasterDataRepository(session))
