"""Asset CRUD endpoints plus classification, permissions and duplication."""

from fastapi import APIRouter, Depends, Query, status

from sidak.application.schemas.asset import (
    AssetClassificationResponse,
    AssetCreate,
    AssetPermissionsResponse,
    AssetResponse,
    AssetUpdate,
    DuplicateAssetRequest,
)
from sidak.application.services import AssetService
from sidak.application.services.asset_classifier import kind_of
from sidak.domain.entities import Asset, AssetKind, UserContext
from sidak.infrastructure.dependencies import get_asset_service, get_current_context
from sidak.presentation.api.v1.endpoints.errors import DOMAIN_ERRORS, http_error

router = APIRouter(prefix="/assets", tags=["Assets"])


def _to_response(asset: Asset) -> AssetResponse:
    return AssetResponse.from_entity(asset, kind_of(asset.jenis_inventaris))


@router.get("", response_model=list[AssetResponse])
async def list_assets(
    search: str | None = Query(None, description="Case-insensitive match on namaBarang"),
    kind: AssetKind | None = Query(None, description="Only items, land or buildings"),
    user: UserContext = Depends(get_current_context),
    service: AssetService = Depends(get_asset_service),
) -> list[AssetResponse]:
    """Assets visible to the caller, oldest first."""
    assets = await service.list_assets(user, search=search, kind=kind)
    return [_to_response(a) for a in assets]


@router.get("/{asset_id}", response_model=AssetResponse)
async def get_asset(
    asset_id: str,
    user: UserContext = Depends(get_current_context),
    service: AssetService = Depends(get_asset_service),
) -> AssetResponse:
    try:
        asset = await service.get_asset(user, asset_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return _to_response(asset)


@router.post("", response_model=AssetResponse, status_code=status.HTTP_201_CREATED)
async def create_asset(
    data: AssetCreate,
    user: UserContext = Depends(get_current_context),
    service: AssetService = Depends(get_asset_service),
) -> AssetResponse:
    """Create an asset. Items without a code get the next generated one."""
    try:
        asset = await service.create_asset(user, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return _to_response(asset)


@router.put("/{asset_id}", response_model=AssetResponse)
async def update_asset(
    asset_id: str,
    data: AssetUpdate,
    user: UserContext = Depends(get_current_context),
    service: AssetService = Depends(get_asset_service),
) -> AssetResponse:
    """Apply the fields sent; id, tanggalInput and createdBy never change."""
    try:
        asset = await service.update_asset(user, asset_id, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return _to_response(asset)


@router.delete("/{asset_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_asset(
    asset_id: str,
    user: UserContext = Depends(get_current_context),
    service: AssetService = Depends(get_asset_service),
) -> None:
    try:
        await service.delete_asset(user, asset_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)


@router.post(
    "/{asset_id}/duplicate",
    response_model=list[AssetResponse],
    status_code=status.HTTP_201_CREATED,
)
async def duplicate_asset(
    asset_id: str,
    body: DuplicateAssetRequest,
    user: UserContext = Depends(get_current_context),
    service: AssetService = Depends(get_asset_service),
) -> list[AssetResponse]:
    """Copy an item into other rooms, one new asset per entry."""
    try:
        copies = await service.duplicate_asset(user, asset_id, body)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return [_to_response(a) for a in copies]


@router.get("/{asset_id}/classification", response_model=AssetClassificationResponse)
async def classify_asset(
    asset_id: str,
    user: UserContext = Depends(get_current_context),
    service: AssetService = Depends(get_asset_service),
) -> AssetClassificationResponse:
    try:
        result = await service.classify_asset(user, asset_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return AssetClassificationResponse(
        kind=result.kind,
        canonical_code=result.canonical_code,
        canonical_condition=result.canonical_condition,
        canonical_source=result.canonical_source,
    )


@router.get("/{asset_id}/permissions", response_model=AssetPermissionsResponse)
async def asset_permissions(
    asset_id: str,
    user: UserContext = Depends(get_current_context),
    service: AssetService = Depends(get_asset_service),
) -> AssetPermissionsResponse:
    """What the caller may do with this asset (drives the edit/delete buttons)."""
    try:
        perms = await service.permissions_for(user, asset_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return AssetPermissionsResponse(
        can_view=perms.can_view,
        can_edit=perms.can_edit,
        can_delete=perms.can_delete,
    )
