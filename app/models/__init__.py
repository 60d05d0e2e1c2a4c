from app.infra.base import Base
from app.models.catalog_brand import CatalogBrand
from app.models.catalog_item import CatalogItem
from app.models.catalog_type import CatalogType

__all__ = ["Base", "CatalogBrand", "CatalogItem", "CatalogType", "create_db_and_tables"]


def create_db_and_tables(bind=None) -> None:
    if bind is None:
        from app.infra.session import engine

        bind = engine
    Base.metadata.create_all(bind=bind)
