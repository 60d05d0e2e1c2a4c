# ruff: noqa: E402
import os
import tempfile
from decimal import Decimal

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="catalog-logs-"))
os.environ.setdefault("LOG_COLORS", "false")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.deps import get_uri_composer
from app.domains.catalog.services.uri_composer import UriComposer
from app.infra.base import Base
from app.infra.session import get_session
from app.models import CatalogBrand, CatalogItem, CatalogType
from apps.api_main import app

BASE_URL = "https://cdn.test"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def uri_composer():
    return UriComposer(BASE_URL)


@pytest.fixture()
def client(db_session, uri_composer):
    def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_uri_composer] = lambda: uri_composer
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def seed_catalog(db_session):
    """
    Cria marcas 1..3 e tipos 1..3, e devolve uma função que insere
    `n` itens com a marca/tipo indicados.
    """
    db_session.add_all(CatalogBrand(id=i, name=f"brand-{i}") for i in range(1, 4))
    db_session.add_all(CatalogType(id=i, name=f"type-{i}") for i in range(1, 4))
    db_session.commit()

    def _seed(n: int, *, brand_id: int = 1, type_id: int = 1, picture: str = "images/{}.png"):
        items = [
            CatalogItem(
                name=f"item-b{brand_id}-t{type_id}-{i}",
                description=None,
                price=Decimal("9.99"),
                picture_uri=picture.format(i),
                catalog_brand_id=brand_id,
                catalog_type_id=type_id,
            )
            for i in range(n)
        ]
        db_session.add_all(items)
        db_session.commit()
        return items

    return _seed
