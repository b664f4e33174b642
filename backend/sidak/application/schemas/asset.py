"""Pydantic DTOs (Data Transfer Objects) for the Asset feature."""

from dataclasses import asdict
from datetime import datetime

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from sidak.application.schemas.base import CamelModel
from sidak.domain.entities import Asset, AssetKind


class AssetFields(CamelModel):
    """Every user-editable asset field; all optional at the schema level.

    Required fields and kind-specific rules are checked by AssetService so the
    whole error list can be reported at once.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    jenis_inventaris: str | None = Field(None, examples=["Elektronik"])
    nama_barang: str | None = Field(None, examples=["Laptop Kantor"])
    unit: str | None = Field(None, examples=["Kelurahan Babakan"])
    no_kode_barang: str | None = Field(None, examples=["ELK-001"])
    keterangan: str | None = None
    photos: list[str] | None = None
    kondisi: str | None = None
    status_tanah: str | None = None

    # Barang
    merk_model: str | None = None
    no_seri_pabrik: str | None = None
    ukuran: str | None = None
    bahan: str | None = None
    tahun_pembuatan: str | None = Field(None, examples=["2023"])
    jumlah_barang: int | None = None
    harga_beli: float | None = None
    sumber_perolehan: str | None = None
    keadaan_barang: str | None = Field(None, examples=["Baik"])
    ruangan: str | None = None

    # Tanah
    kode_barang: str | None = None
    register_no: str | None = Field(None, alias="register")
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
    no_bast: str | None = Field(None, alias="noBAST")
    tgl_bast: str | None = Field(None, alias="tglBAST")
    id_penerimaan: str | None = None
    status_aset: str | None = None
    harga: float | None = None
    latitude: str | None = None
    longitude: str | None = None

    # Bangunan
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


class AssetCreate(AssetFields):
    """Schema for creating a new asset."""


class AssetUpdate(AssetFields):
    """Schema for updating an asset: only the fields sent are applied."""


class AssetResponse(AssetFields):
    """Schema returned to the client."""

    id: str
    kind: AssetKind
    created_by: str | None = None
    tanggal_input: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, asset: Asset, kind: AssetKind) -> "AssetResponse":
        return cls.model_validate({**asdict(asset), "kind": kind})


class DuplicateEntry(CamelModel):
    """One target location for a duplicated item."""

    ruangan: str = Field(..., min_length=1, max_length=255)
    jumlah_barang: int = Field(1, ge=1)


class DuplicateAssetRequest(CamelModel):
    """Copy an item into several rooms, one new asset per entry."""

    entries: list[DuplicateEntry] = Field(..., min_length=1)


class AssetClassificationResponse(CamelModel):
    """Kind and alias-resolved fields of one asset."""

    kind: AssetKind
    canonical_code: str
    canonical_condition: str
    canonical_source: str


class AssetPermissionsResponse(CamelModel):
    """What the current user may do with one asset."""

    can_view: bool
    can_edit: bool
    can_delete: bool
