# app/infra/uow.py
# Unit of Work simples para SQLAlchemy (só leitura nesta API)

from __future__ import annotations

from functools import cached_property

from sqlalchemy.orm import Session

from app.repositories.catalog.read.catalog_item_read_repo import CatalogItemReadRepository


class UoW:
    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    # Repositórios -------------------------------------------------
    @cached_property
    def catalog_items(self) -> CatalogItemReadRepository:
        return CatalogItemReadRepository(self.db)
