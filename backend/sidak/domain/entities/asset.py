"""Domain entity: a single inventory asset (movable item, land parcel, or building)."""

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4


class AssetKind(str, Enum):
    """The three asset shapes a record can take."""

    ITEM = "item"
    LAND = "land"
    BUILDING = "building"


class AssetCondition(str, Enum):
    """Condition vocabulary for movable items."""

    BAIK = "Baik"
    RUSAK_RINGAN = "Rusak Ringan"
    RUSAK_BERAT = "Rusak Berat"


# Fields that are set once at creation and never changed by an update.
IMMUTABLE_FIELDS = frozenset({"id", "tanggal_input", "created_by"})


@dataclass
class Asset:
    """Core domain entity for one inventory record.

    The record is deliberately flat: every kind-specific field is optional and
    only meaningful for its own kind. Which kind applies is decided from
    ``jenis_inventaris`` alone (see ``asset_classifier.classify``), never from
    which optional fields happen to be populated.
    """

    jenis_inventaris: str = ""
    nama_barang: str = ""
    unit: str = ""
    id: str = field(default_factory=lambda: str(uuid4()))
    no_kode_barang: str | None = None
    keterangan: str | None = None
    photos: list[str] = field(default_factory=list)
    kondisi: str | None = None
    status_tanah: str | None = None

    # Barang (item)
    merk_model: str | None = None
    no_seri_pabrik: str | None = None
    ukuran: str | None = None
    bahan: str | None = None
    tahun_pembuatan: str | None = None
    jumlah_barang: int | None = None
    harga_beli: float | None = None
    sumber_perolehan: str | None = None
    keadaan_barang: str | None = None
    ruangan: str | None = None

    # Tanah (land)
    kode_barang: str | None = None
    register_no: str | None = None
    luas_tanah: float | None = None
    tahun_perolehan: int | None = None
    alamat: str | None = None
    letak_alamat: str | None = None
    hak: str | None = None
    status_hak_tanah: str | None = None
    sertifikat_tanggal: str | None = None
    tanggal_sertifikat: str | None = None
    sertifikat_nomor: str | None = None
    nomor_sertifikat: str | None = None
    penggunaan: str | None = None
    asal_usul: str | None = None
    status_barang: str | None = None
    tgl_buku: str | None = None
    no_bast: str | None = None
    tgl_bast: str | None = None
    id_penerimaan: str | None = None
    status_aset: str | None = None
    harga: float | None = None
    latitude: str | None = None
    longitude: str | None = None

    # Bangunan (building)
    nup: str | None = None
    kondisi_bangunan: str | None = None
    bertingkat: str | None = None
    beton: str | None = None
    luas_bangunan: float | None = None
    tanggal_dokumen: str | None = None
    dokumen_tanggal: str | None = None
    nomor_dokumen: str | None = None
    dokumen_nomor: str | None = None
    kode_tanah: str | None = None

    # Audit
    created_by: str | None = None
    tanggal_input: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, **changes: Any) -> None:
        """Apply field changes, skipping immutable fields, and refresh updated_at."""
        for name, value in changes.items():
            if name in IMMUTABLE_FIELDS or name == "updated_at":
                continue
            if name not in ASSET_FIELD_NAMES:
                raise AttributeError(f"Asset has no field '{name}'")
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)


ASSET_FIELD_NAMES: frozenset[str] = frozenset(f.name for f in fields(Asset))
