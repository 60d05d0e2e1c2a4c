from fastapi.testclient import TestClient

from app.core.errors import StorageError
from app.repositories.catalog.read.catalog_item_read_repo import CatalogItemReadRepository
from apps.api_main import app


def test_list_paged_first_page(client, seed_catalog):
    seed_catalog(25, brand_id=2)
    seed_catalog(4, brand_id=1)

    resp = client.get("/api/catalog-items?pageIndex=0&pageSize=10&catalogBrandId=2")
    assert resp.status_code == 200

    body = resp.json()
    assert set(body) == {"correlationId", "catalogItems", "pageCount"}
    assert body["pageCount"] == 3
    assert len(body["catalogItems"]) == 10

    item = body["catalogItems"][0]
    assert set(item) == {
        "id",
        "name",
        "description",
        "price",
        "pictureUri",
        "catalogTypeId",
        "catalogBrandId",
    }
    assert item["catalogBrandId"] == 2
    assert item["pictureUri"].startswith("https://cdn.test/images/")


def test_list_paged_last_page(client, seed_catalog):
    seed_catalog(25, brand_id=2)

    resp = client.get("/api/catalog-items?pageIndex=2&pageSize=10&catalogBrandId=2")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body["catalogItems"]) == 5
    assert body["pageCount"] == 3


def test_list_paged_no_matches(client, seed_catalog):
    seed_catalog(5, type_id=1)

    resp = client.get("/api/catalog-items?pageIndex=0&pageSize=10&catalogTypeId=99")
    assert resp.status_code == 200
    body = resp.json()
    assert body["catalogItems"] == []
    assert body["pageCount"] == 0


def test_defaults_without_query_params(client, seed_catalog):
    seed_catalog(5)

    resp = client.get("/api/catalog-items")
    assert resp.status_code == 200
    body = resp.json()
    assert body["catalogItems"] == []
    assert body["pageCount"] == 1


def test_correlation_id_is_echoed(client, seed_catalog):
    seed_catalog(1)

    resp = client.get(
        "/api/catalog-items?pageSize=5",
        headers={"X-Correlation-ID": "abc-123"},
    )
    assert resp.status_code == 200
    assert resp.json()["correlationId"] == "abc-123"
    assert resp.headers["X-Correlation-ID"] == "abc-123"


def test_correlation_id_is_generated(client):
    resp = client.get("/api/catalog-items?pageSize=5")
    assert resp.status_code == 200
    cid = resp.json()["correlationId"]
    assert cid
    assert resp.headers["X-Correlation-ID"] == cid


def test_negative_page_index_is_rejected(client):
    resp = client.get("/api/catalog-items?pageIndex=-1&pageSize=10")
    assert resp.status_code == 422


def test_storage_failure_returns_empty_500(client, monkeypatch):
    def broken_count(self, flt):
        raise StorageError("connection refused")

    monkeypatch.setattr(CatalogItemReadRepository, "count", broken_count)

    resp = client.get("/api/catalog-items?pageSize=10")
    assert resp.status_code == 500
    assert resp.content == b""


def test_unexpected_failure_returns_empty_500(client, monkeypatch):
    def broken_list(self, spec):
        raise RuntimeError("boom")

    monkeypatch.setattr(CatalogItemReadRepository, "list", broken_list)

    with TestClient(app, raise_server_exceptions=False) as c:
        resp = c.get(
            "/api/catalog-items?pageSize=10",
            headers={"X-Correlation-ID": "cid-500"},
        )
    assert resp.status_code == 500
    assert resp.content == b""
    assert resp.headers["X-Correlation-ID"] == "cid-500"


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
