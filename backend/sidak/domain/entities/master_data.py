"""Domain entity for admin-managed reference data (units, categories, sources)."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class MasterDataType(str, Enum):
    """Supported master data lists."""

    UNITS = "units"
    CATEGORIES = "categories"
    SOURCES = "sources"


@dataclass
class MasterDataItem:
    """One entry of a master data list.

    ``code`` is only used by categories, where it is the prefix for generated
    item codes (e.g. ``Elektronik`` → ``ELK``).
    """

    type: MasterDataType
    name: str
    code: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        name: str | None = None,
        code: str | None = None,
        is_active: bool | None = None,
    ) -> None:
        """Update mutable fields and refresh the updated_at timestamp."""
        if name is not None:
            self.name = name
        if code is not None:
            self.code = code
        if is_active is not None:
            self.is_active = is_active
        self.updated_at = datetime.now(timezone.utc)
