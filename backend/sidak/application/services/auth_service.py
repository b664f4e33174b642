"""Application service for login, session verification and password changes."""

import logging
from datetime import datetime, timezone

from sidak.application.interfaces import UserRepository
from sidak.domain.entities import User
from sidak.domain.exceptions import AuthenticationError
from sidak.infrastructure.security import (
    TokenSigner,
    generate_salt,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)
audit = logging.getLogger("sidak.audit")


class AuthService:
    """Verifies credentials and session tokens against the user repository."""

    def __init__(self, repository: UserRepository, signer: TokenSigner):
        self._repository = repository
        self._signer = signer

    async def login(self, username: str, password: str) -> tuple[str, User]:
        """Return ``(token, user)`` for valid credentials."""
        user = await self._repository.get_by_username(username.strip())
        if (
            user is None
            or not user.is_active
            or not verify_password(password, user.password_salt, user.password_hash)
        ):
            audit.warning("Failed login for username=%s", username)
            raise AuthenticationError("Invalid username or password")
        audit.info("User logged in: %s (%s)", user.username, user.role)
        return self._signer.issue(user.username), user

    async def authenticate(self, token: str) -> User:
        """Resolve a session token to its (still active) user."""
        username = self._signer.verify(token)
        user = await self._repository.get_by_username(username)
        if user is None or not user.is_active:
            raise AuthenticationError("User not found")
        return user

    async def change_own_password(
        self, user: User, old_password: str, new_password: str
    ) -> None:
        if not verify_password(old_password, user.password_salt, user.password_hash):
            raise AuthenticationError("Old password is incorrect")
        user.password_salt = generate_salt()
        user.password_hash = hash_password(new_password, user.password_salt)
        user.updated_at = datetime.now(timezone.utc)
        await self._repository.update(user)
        audit.info("Password changed for user=%s", user.username)
