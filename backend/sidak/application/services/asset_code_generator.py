"""Sequential item code generation (``ELK-001``, ``ELK-002``, ...)."""

import re
from collections.abc import Iterable, Mapping

from sidak.application.services.asset_classifier import is_item
from sidak.domain.entities import Asset

FALLBACK_PREFIX = "INV"

JENIS_CODE_PREFIXES: dict[str, str] = {
    "Elektronik": "ELK",
    "Perabot": "PRB",
    "Kendaraan": "KDR",
    "Alat Tulis": "ALT",
    "Alat Kebersihan": "ALB",
    "Alat Dapur": "ADP",
    "Alat Kesehatan": "AKS",
    "Alat Olahraga": "AOR",
    "Alat Musik": "AMS",
    "Alat Listrik": "ALS",
    "Alat Pendingin": "APD",
    "Alat Komunikasi": "AKM",
    "Alat Pengolah Data": "APD2",
    "Alat Bantu": "ABT",
    "Lainnya": "LNN",
}

_SUFFIX = re.compile(r"-(\d{3,})$")


def prefix_for(jenis: str | None, prefixes: Mapping[str, str] = JENIS_CODE_PREFIXES) -> str:
    return prefixes.get(jenis or "", FALLBACK_PREFIX)


def _format(prefix: str, number: int) -> str:
    return f"{prefix}-{number:03d}"


def generate_item_code(
    jenis: str | None,
    existing: Iterable[Asset],
    prefixes: Mapping[str, str] = JENIS_CODE_PREFIXES,
) -> str:
    """Next free code for a new item of kind ``jenis``.

    Scans existing item codes that start with ``PREFIX-``, takes the highest
    trailing number (at least three digits) and adds one, skipping any
    candidate that is already taken.
    """
    prefix = prefix_for(jenis, prefixes)
    marker = prefix + "-"
    used = {
        asset.no_kode_barang
        for asset in existing
        if is_item(asset) and asset.no_kode_barang and asset.no_kode_barang.startswith(marker)
    }

    highest = 0
    for code in used:
        match = _SUFFIX.search(code)
        if match:
            highest = max(highest, int(match.group(1)))

    number = highest + 1
    candidate = _format(prefix, number)
    while candidate in used:
        number += 1
        candidate = _format(prefix, number)
    return candidate
