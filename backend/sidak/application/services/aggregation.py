"""Dashboard aggregation over an already-filtered asset collection.

Read-only and recomputed on every call. Callers pass the set the user may see
(``access_policy.filter_visible``); nothing here applies access rules.

Note on the totals: ``compute_totals`` counts land and buildings with an EXACT
(case-insensitive) match on the labels "tanah" / "bangunan", whereas
classification and the yearly series use substring matching. An asset labelled
"Sebagian Tanah Adat" is therefore a Land asset everywhere except in
``total_land_count``. The asymmetry is kept for compatibility with existing
reports.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from sidak.application.services.asset_classifier import kind_of
from sidak.domain.entities import Asset, AssetKind

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class AssetTotals:
    total_item_quantity: int
    total_land_count: int
    total_building_count: int


@dataclass(frozen=True)
class YearlyPoint:
    year: str
    item_qty: int
    land_count: int
    building_count: int


def _label(asset: Asset) -> str:
    return str(asset.jenis_inventaris or "").lower()


def _quantity(asset: Asset) -> int:
    return asset.jumlah_barang or 0


def parse_year(raw: object) -> int | None:
    """Parse the leading integer of a year value; None when there is none."""
    if raw is None:
        return None
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return None
    return int(match.group(1))


def compute_totals(assets: Iterable[Asset]) -> AssetTotals:
    item_quantity = 0
    land_count = 0
    building_count = 0
    for asset in assets:
        if kind_of(asset.jenis_inventaris) is AssetKind.ITEM:
            item_quantity += _quantity(asset)
        label = _label(asset)
        if label == "tanah":
            land_count += 1
        elif label == "bangunan":
            building_count += 1
    return AssetTotals(
        total_item_quantity=item_quantity,
        total_land_count=land_count,
        total_building_count=building_count,
    )


def compute_yearly_series(assets: Iterable[Asset]) -> list[YearlyPoint]:
    """Per-year item quantity and land/building counts, ascending by year.

    Assets without a parsable ``tahun_pembuatan`` are left out entirely.
    """
    buckets: dict[int, list[int]] = {}
    for asset in assets:
        year = parse_year(asset.tahun_pembuatan)
        if year is None:
            continue
        counts = buckets.setdefault(year, [0, 0, 0])
        kind = kind_of(asset.jenis_inventaris)
        if kind is AssetKind.LAND:
            counts[1] += 1
        elif kind is AssetKind.BUILDING:
            counts[2] += 1
        else:
            counts[0] += _quantity(asset)

    return [
        YearlyPoint(
            year=str(year),
            item_qty=counts[0],
            land_count=counts[1],
            building_count=counts[2],
        )
        for year, counts in sorted(buckets.items())
    ]
