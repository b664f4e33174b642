"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod

from sidak.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User | None:
        ...

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        """Case-insensitive lookup by username."""
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """Case-insensitive lookup by email."""
        ...

    @abstractmethod
    async def get_all(self) -> list[User]:
        ...

    @abstractmethod
    async def count(self) -> int:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        ...

    @abstractmethod
    async def update(self, user: User) -> User:
        ...

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Delete a user. Returns True if deleted, False if not found."""
        ...
