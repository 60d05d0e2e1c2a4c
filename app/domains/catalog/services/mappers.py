# app/domains/catalog/services/mappers.py
from __future__ import annotations

from pydantic import ValidationError

from app.core.errors import MappingError
from app.models.catalog_item import CatalogItem
from app.schemas.catalog_items import CatalogItemOut


def map_catalog_item_to_out(item: CatalogItem, *, picture_uri: str | None) -> CatalogItemOut:
    """Projeção campo-a-campo; picture_uri já vem composto pelo chamador."""
    try:
        return CatalogItemOut(
            id=item.id,
            name=item.name,
            description=item.description,
            price=item.price,
            picture_uri=picture_uri,
            catalog_type_id=item.catalog_type_id,
            catalog_brand_id=item.catalog_brand_id,
        )
    except ValidationError as e:
        raise MappingError(f"Catalog item {getattr(item, 'id', '?')} could not be mapped: {e}") from e
