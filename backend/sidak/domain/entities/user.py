"""Domain entities for application users and the read-only access context."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class Role(str, Enum):
    """User roles, from most to least privileged."""

    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"


@dataclass
class User:
    """A stored user account.

    ``allowed_units`` is an ordered list. Empty means no unit restriction was
    granted; how that is interpreted is up to the access policy.
    """

    username: str
    email: str
    role: str
    password_hash: str
    password_salt: str
    allowed_units: list[str] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_context(self) -> "UserContext":
        return UserContext(
            role=self.role,
            allowed_units=tuple(self.allowed_units),
            username=self.username,
        )


@dataclass(frozen=True)
class UserContext:
    """What the policy layer knows about the caller.

    ``role`` is kept as a plain string: a malformed or unknown value must reach
    the policy so it can fall back to the most restrictive outcome.
    """

    role: str | None
    allowed_units: tuple[str, ...] = ()
    username: str = ""
