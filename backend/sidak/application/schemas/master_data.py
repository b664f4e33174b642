"""Pydantic DTOs for master data (units, categories, sources)."""

from datetime import datetime

from pydantic import Field

from sidak.application.schemas.base import CamelModel
from sidak.domain.entities import MasterDataType


class MasterDataCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Elektronik"])
    code: str | None = Field(None, max_length=20, examples=["ELK"])
    is_active: bool = True


class MasterDataUpdate(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    code: str | None = Field(None, max_length=20)
    is_active: bool | None = None


class MasterDataResponse(CamelModel):
    id: str
    type: MasterDataType
    name: str
    code: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
