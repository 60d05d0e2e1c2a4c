from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class CatalogItemOut(_CamelModel):
    id: int
    name: str
    description: str | None = None
    price: Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
    picture_uri: str | None = None
    catalog_type_id: int
    catalog_brand_id: int


class ListPagedCatalogItemOut(_CamelModel):
    correlation_id: str
    catalog_items: list[CatalogItemOut] = Field(default_factory=list)
    page_count: int = 0
