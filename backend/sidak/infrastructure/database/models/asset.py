"""SQLAlchemy ORM model for the Asset entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from sidak.infrastructure.database.base import Base


class AssetModel(Base):
    """ORM model: maps to the 'assets' table.

    Columns shared by every kind are stored as real columns; the remaining
    kind-specific fields live in the ``details`` JSON document.
    """

    __tablename__ = "assets"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    kind: Mapped[str] = mapped_column(String(20), nullable=False)
    code: Mapped[str | None] = mapped_column(String(100), nullable=True)
    jenis_inventaris: Mapped[str] = mapped_column(String(100), nullable=False)
    nama_barang: Mapped[str] = mapped_column(String(255), nullable=False)
    unit: Mapped[str] = mapped_column(String(255), nullable=False)
    photos: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    details: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
    tanggal_input: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_assets_kind_code", "kind", "code"),
        Index("ix_assets_unit", "unit"),
    )

    def __repr__(self) -> str:
        return f"<AssetModel(id={self.id}, kind='{self.kind}', name='{self.nama_barang}')>"
