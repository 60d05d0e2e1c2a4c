from app.infra.uow import UoW
from app.repositories.catalog.read.catalog_item_read_repo import CatalogItemReadRepository


def test_uow_exposes_catalog_items_repo_bound_to_session(db_session):
    uow = UoW(db_session)

    repo = uow.catalog_items
    assert isinstance(repo, CatalogItemReadRepository)
    assert repo.db is db_session
    assert uow.catalog_items is repo

