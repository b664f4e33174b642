"""Master data endpoints for units, categories and sources."""

from fastapi import APIRouter, Depends, Query, status

from sidak.application.schemas.master_data import (
    MasterDataCreate,
    MasterDataResponse,
    MasterDataUpdate,
)
from sidak.application.services import MasterDataService
from sidak.domain.entities import MasterDataType, UserContext
from sidak.infrastructure.dependencies import get_current_context, get_master_data_service
from sidak.presentation.api.v1.endpoints.errors import DOMAIN_ERRORS, http_error

router = APIRouter(prefix="/master-data", tags=["Master Data"])


@router.get("/{item_type}", response_model=list[MasterDataResponse])
async def list_items(
    item_type: MasterDataType,
    active_only: bool = Query(False, alias="activeOnly"),
    _: UserContext = Depends(get_current_context),
    service: MasterDataService = Depends(get_master_data_service),
) -> list[MasterDataResponse]:
    items = await service.list_items(item_type, active_only=active_only)
    return [MasterDataResponse.model_validate(i) for i in items]


@router.post(
    "/{item_type}",
    response_model=MasterDataResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_item(
    item_type: MasterDataType,
    data: MasterDataCreate,
    actor: UserContext = Depends(get_current_context),
    service: MasterDataService = Depends(get_master_data_service),
) -> MasterDataResponse:
    try:
        item = await service.create_item(actor, item_type, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MasterDataResponse.model_validate(item)


@router.put("/{item_type}/{item_id}", response_model=MasterDataResponse)
async def update_item(
    item_type: MasterDataType,
    item_id: str,
    data: MasterDataUpdate,
    actor: UserContext = Depends(get_current_context),
    service: MasterDataService = Depends(get_master_data_service),
) -> MasterDataResponse:
    try:
        item = await service.update_item(actor, item_type, item_id, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MasterDataResponse.model_validate(item)


@router.delete("/{item_type}/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_type: MasterDataType,
    item_id: str,
    actor: UserContext = Depends(get_current_context),
    service: MasterDataService = Depends(get_master_data_service),
) -> None:
    try:
        await service.delete_item(actor, item_type, item_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
