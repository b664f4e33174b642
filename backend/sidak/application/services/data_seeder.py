"""Startup seeding of master data lists and the default user accounts.

Executed once at application startup via the FastAPI lifespan. Every step is
idempotent: a master data list is only seeded while it is empty, and default
users are only created while the users table is empty.
"""

import logging
from pathlib import Path

import yaml

from sidak.application.interfaces import MasterDataRepository, UserRepository
from sidak.domain.entities import MasterDataItem, MasterDataType, Role, User
from sidak.infrastructure.security import generate_salt, hash_password

logger = logging.getLogger(__name__)

# (username, password, role, email, number of leading units granted)
DEFAULT_USERS: tuple[tuple[str, str, Role, str, int | None], ...] = (
    ("admin", "admin123", Role.ADMIN, "admin@sidak.kelurahan.id", None),
    ("editor", "editor123", Role.EDITOR, "editor@sidak.kelurahan.id", 3),
    ("viewer", "viewer123", Role.VIEWER, "viewer@sidak.kelurahan.id", 4),
)


class DataSeeder:
    """Loads ``master-data.yaml`` and the default accounts into the repositories."""

    def __init__(
        self,
        master_data_repository: MasterDataRepository,
        user_repository: UserRepository,
        seed_file: str | None = None,
        seed_default_users: bool = True,
    ):
        self._master_data = master_data_repository
        self._users = user_repository
        self._seed_file = Path(seed_file) if seed_file else None
        self._seed_default_users = seed_default_users

    async def seed(self) -> dict[str, int]:
        """Run every seeding step; returns the number of rows created per list."""
        created: dict[str, int] = {}
        data = self._load_yaml()
        for item_type in MasterDataType:
            created[item_type.value] = await self._seed_list(
                item_type, data.get(item_type.value) or []
            )
        created["users"] = await self._seed_users() if self._seed_default_users else 0
        logger.info("Seeding complete: %s", created)
        return created

    def _load_yaml(self) -> dict:
        if self._seed_file is None or not self._seed_file.exists():
            logger.warning("Master data seed file not found: %s", self._seed_file)
            return {}
        with open(self._seed_file, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    async def _seed_list(self, item_type: MasterDataType, entries: list) -> int:
        if await self._master_data.get_all(item_type):
            logger.debug("Master data '%s' already present, skipping", item_type.value)
            return 0

        count = 0
        for entry in entries:
            if isinstance(entry, str):
                entry = {"name": entry}
            name = str(entry.get("name") or "").strip()
            if not name:
                continue
            code = str(entry.get("code") or "").strip().upper() or None
            await self._master_data.create(MasterDataItem(type=item_type, name=name, code=code))
            count += 1
        return count

    async def _seed_users(self) -> int:
        if await self._users.count() > 0:
            logger.debug("Users already present, skipping default accounts")
            return 0

        units = [u.name for u in await self._master_data.get_all(MasterDataType.UNITS)]
        for username, password, role, email, unit_count in DEFAULT_USERS:
            salt = generate_salt()
            await self._users.create(
                User(
                    username=username,
                    email=email,
                    role=role.value,
                    password_hash=hash_password(password, salt),
                    password_salt=salt,
                    allowed_units=units[:unit_count] if unit_count is not None else [],
                )
            )
        logger.warning(
            "Created %d default user accounts; change their passwords", len(DEFAULT_USERS)
        )
        return len(DEFAULT_USERS)
