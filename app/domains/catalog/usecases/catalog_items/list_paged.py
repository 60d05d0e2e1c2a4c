# app/domains/catalog/usecases/catalog_items/list_paged.py
# Lista itens do catálogo paginados (offset/limit) com filtros de marca e tipo

from __future__ import annotations

import logging
import threading

from app.core.errors import RequestCancelled, ValidationFailure
from app.core.logging import log_timing
from app.domains.catalog.services.mappers import map_catalog_item_to_out
from app.domains.catalog.services.pagination import page_count, page_window
from app.domains.catalog.services.specifications import CatalogFilter, CatalogFilterPaginated
from app.domains.catalog.services.uri_composer import UriComposer
from app.infra.uow import UoW
from app.schemas.catalog_items import ListPagedCatalogItemOut

log = logging.getLogger(__name__)


def _ensure_not_cancelled(cancel_event: threading.Event | None, step: str) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise RequestCancelled(f"Catalog listing cancelled before {step}")


def execute(
    uow: UoW,
    uri_composer: UriComposer,
    *,
    page_index: int = 0,
    page_size: int = 0,
    brand_id: int | None = None,
    type_id: int | None = None,
    correlation_id: str,
    cancel_event: threading.Event | None = None,
) -> ListPagedCatalogItemOut:
    """
    Conta os itens que cumprem o filtro, busca a página pedida e devolve-a
    com os URIs das imagens já resolvidos.

    O count e o list recebem o mesmo CatalogFilter. Alterações ao catálogo
    entre as duas leituras podem deixar page_count desalinhado com os itens
    devolvidos; isso é aceite.

    Raises:
        StorageError: falha no count ou no list (nada chega à composição de URIs)
        RequestCancelled: cancel_event sinalizado a meio do pipeline
    """
    if page_index < 0 or page_size < 0:
        raise ValidationFailure(f"page_index/page_size must be >= 0 (got {page_index}/{page_size})")

    repo = uow.catalog_items
    flt = CatalogFilter(brand_id=brand_id, type_id=type_id)

    # 1) Total de itens que cumprem o filtro
    _ensure_not_cancelled(cancel_event, "count")
    with log_timing("count_catalog_items", log, **flt.to_dict()):
        total_items = repo.count(flt)
    log.info("Total items: %d (filter=%s)", total_items, flt.to_dict())

    # 2) Página pedida, com o mesmo filtro
    _ensure_not_cancelled(cancel_event, "fetch")
    spec = CatalogFilterPaginated(filter=flt, window=page_window(page_index, page_size))
    with log_timing("list_catalog_items", log, skip=spec.skip, take=spec.take):
        records = repo.list(spec)
    log.info("Returned %d items (skip=%d, take=%d)", len(records), spec.skip, spec.take)

    # 3) Projeção com URI da imagem já composto
    _ensure_not_cancelled(cancel_event, "response assembly")
    items = [
        map_catalog_item_to_out(r, picture_uri=uri_composer.compose_pic_uri(r.picture_uri))
        for r in records
    ]

    return ListPagedCatalogItemOut(
        correlation_id=correlation_id,
        catalog_items=items,
        page_count=page_count(total_items, page_size),
    )
