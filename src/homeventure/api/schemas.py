from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from homeventure.models import PropertyStatus


class SetStatusBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    property_id: Union[int, str] = Field(alias="propertyId")
    status: PropertyStatus


class DeletePropertyBody(BaseModel):
    id: Union[int, str]


class EnrichBody(BaseModel):
    address: Optional[str] = None


class AddressSearchBody(BaseModel):
    query: Optional[str] = None
