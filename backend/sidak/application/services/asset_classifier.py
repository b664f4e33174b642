"""Asset classification: kind detection and alias resolution.

Every asset is exactly one of Item, Land or Building, decided from the free-text
``jenis_inventaris`` label:

  1. lower-cased label contains "tanah"    → Land
  2. lower-cased label contains "bangunan" → Building
  3. anything else (including empty)       → Item

Several fields exist under more than one legacy name. ``ALIAS_TABLE`` declares
the read precedence for each canonical field; the first non-empty value wins.
"""

from dataclasses import dataclass
from typing import Any

from sidak.domain.entities import Asset, AssetKind

_LAND_MARKER = "tanah"
_BUILDING_MARKER = "bangunan"

# canonical field → attribute names in precedence order
ALIAS_TABLE: dict[str, tuple[str, ...]] = {
    "code": ("no_kode_barang", "kode_barang", "kode_tanah"),
    "condition": ("keadaan_barang", "kondisi"),
    "source": ("sumber_perolehan", "asal_usul"),
    "address": ("alamat", "letak_alamat"),
    "land_right": ("status_hak_tanah", "hak"),
    "certificate_date": ("tanggal_sertifikat", "sertifikat_tanggal"),
    "certificate_number": ("nomor_sertifikat", "sertifikat_nomor"),
    "document_date": ("tanggal_dokumen", "dokumen_tanggal"),
    "document_number": ("nomor_dokumen", "dokumen_nomor"),
    "building_condition": ("kondisi", "kondisi_bangunan"),
}


@dataclass(frozen=True)
class AssetClassification:
    """Kind plus the alias-resolved values callers usually need."""

    kind: AssetKind
    canonical_code: str
    canonical_condition: str
    canonical_source: str


def kind_of(jenis_inventaris: Any) -> AssetKind:
    """Map a jenis label to its asset kind. Total: never raises."""
    jenis = str(jenis_inventaris or "").lower()
    if _LAND_MARKER in jenis:
        return AssetKind.LAND
    if _BUILDING_MARKER in jenis:
        return AssetKind.BUILDING
    return AssetKind.ITEM


def resolve_alias(asset: Asset, canonical_field: str) -> str:
    """Return the first non-empty value among the aliases of ``canonical_field``.

    Returns ``""`` when none of the aliases carry data.
    """
    for name in ALIAS_TABLE[canonical_field]:
        value = getattr(asset, name, None)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return ""


def classify(asset: Asset) -> AssetClassification:
    """Classify ``asset`` and resolve its code, condition and source aliases."""
    return AssetClassification(
        kind=kind_of(getattr(asset, "jenis_inventaris", None)),
        canonical_code=resolve_alias(asset, "code"),
        canonical_condition=resolve_alias(asset, "condition"),
        canonical_source=resolve_alias(asset, "source"),
    )


def is_item(asset: Asset) -> bool:
    return kind_of(asset.jenis_inventaris) is AssetKind.ITEM


def is_land(asset: Asset) -> bool:
    return kind_of(asset.jenis_inventaris) is AssetKind.LAND


def is_building(asset: Asset) -> bool:
    return kind_of(asset.jenis_inventaris) is AssetKind.BUILDING
