"""Unit tests for asset kind detection and alias resolution."""

import pytest

from sidak.application.services.asset_classifier import (
    classify,
    is_building,
    is_item,
    is_land,
    kind_of,
    resolve_alias,
)
from sidak.domain.entities import Asset, AssetKind


@pytest.mark.parametrize(
    "jenis, expected",
    [
        ("Tanah", AssetKind.LAND),
        ("TANAH KAS DESA", AssetKind.LAND),
        ("Sebagian Tanah Adat", AssetKind.LAND),
        ("Bangunan", AssetKind.BUILDING),
        ("Gedung dan Bangunan", AssetKind.BUILDING),
        ("Elektronik", AssetKind.ITEM),
        ("", AssetKind.ITEM),
        (None, AssetKind.ITEM),
    ],
)
def test_kind_of(jenis, expected):
    assert kind_of(jenis) is expected


def test_land_marker_wins_over_building_marker():
    assert kind_of("Bangunan di atas Tanah") is AssetKind.LAND


def test_kind_predicates_are_exclusive():
    for jenis in ("Tanah", "Bangunan", "Perabot"):
        asset = Asset(jenis_inventaris=jenis, nama_barang="x", unit="u")
        assert [is_item(asset), is_land(asset), is_building(asset)].count(True) == 1


def test_resolve_alias_takes_first_non_empty_value():
    asset = Asset(jenis_inventaris="Tanah", no_kode_barang="  ", kode_barang="TNH-9")
    assert resolve_alias(asset, "code") == "TNH-9"


def test_resolve_alias_trims_and_defaults_to_empty():
    asset = Asset(jenis_inventaris="Perabot", sumber_perolehan="  Hibah ")
    assert resolve_alias(asset, "source") == "Hibah"
    assert resolve_alias(asset, "address") == ""


def test_classify_building_resolves_code_from_kode_tanah():
    asset = Asset(
        jenis_inventaris="Bangunan",
        kode_tanah="BGN-01",
        kondisi="Baik",
        asal_usul="APBD",
    )
    result = classify(asset)
    assert result.kind is AssetKind.BUILDING
    assert result.canonical_code == "BGN-01"
    assert result.canonical_condition == "Baik"
    assert result.canonical_source == "APBD"


def test_classify_item_prefers_keadaan_barang_over_kondisi():
    asset = Asset(jenis_inventaris="Elektronik", keadaan_barang="Rusak Ringan", kondisi="Baik")
    assert classify(asset).canonical_condition == "Rusak Ringan"


def test_no_kode_barang_wins_over_kode_barang_when_both_are_set():
    asset = Asset(jenis_inventaris="Tanah", no_kode_barang="NKB-1", kode_barang="KB-1")
    assert resolve_alias(asset, "code") == "NKB-1"
    assert classify(asset).canonical_code == "NKB-1"
