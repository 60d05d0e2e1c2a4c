# app/repositories/catalog/read/catalog_item_read_repo.py
from __future__ import annotations

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import StorageError
from app.domains.catalog.services.specifications import CatalogFilter, CatalogFilterPaginated
from app.models.catalog_item import CatalogItem


class CatalogItemReadRepository:
    """
    Consultas de leitura para itens do catálogo.
    Ordem estável por id ascendente, igual para count e list.
    """

    def __init__(self, db: Session):
        self.db = db

    # Helpers internos --------------------------------------------

    def _apply_filter(self, stmt: Select, flt: CatalogFilter) -> Select:
        if flt.brand_id is not None:
            stmt = stmt.where(CatalogItem.catalog_brand_id == flt.brand_id)
        if flt.type_id is not None:
            stmt = stmt.where(CatalogItem.catalog_type_id == flt.type_id)
        return stmt

    # Leitura -----------------------------------------------------

    def count(self, flt: CatalogFilter) -> int:
        stmt = self._apply_filter(select(func.count(CatalogItem.id)), flt)
        try:
            total = self.db.scalar(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to count catalog items ({flt.to_dict()}): {e}") from e
        return int(total or 0)

    def list(self, spec: CatalogFilterPaginated) -> list[CatalogItem]:
        if spec.take == 0:
            return []

        stmt = self._apply_filter(select(CatalogItem), spec.filter)
        stmt = stmt.order_by(CatalogItem.id.asc()).offset(spec.skip).limit(spec.take)
        try:
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to list catalog items ({spec.filter.to_dict()}): {e}") from e
