from __future__ import annotations

import logging
import threading
from functools import partial
from typing import Annotated

import anyio
from fastapi import APIRouter, Depends, Query, Request

from app.core.deps import get_uow, get_uri_composer
from app.domains.catalog.services.uri_composer import UriComposer
from app.domains.catalog.usecases.catalog_items.list_paged import (
    execute as uc_q_list_paged,
)
from app.infra.uow import UoW
from app.schemas.catalog_items import ListPagedCatalogItemOut

router = APIRouter(prefix="/catalog-items", tags=["CatalogItemEndpoints"])
log = logging.getLogger("catalog.api.catalog_items")

UowDep = Annotated[UoW, Depends(get_uow)]
UriComposerDep = Annotated[UriComposer, Depends(get_uri_composer)]


@router.get(
    "",
    summary="List Catalog Items (paged)",
    description="List Catalog Items (paged)",
    operation_id="catalog-items.ListPaged",
    response_model=ListPagedCatalogItemOut,
)
async def list_paged(
    request: Request,
    uow: UowDep,
    uri_composer: UriComposerDep,
    page_index: int = Query(0, alias="pageIndex", ge=0),
    page_size: int = Query(0, alias="pageSize", ge=0),
    catalog_brand_id: int | None = Query(None, alias="catalogBrandId"),
    catalog_type_id: int | None = Query(None, alias="catalogTypeId"),
):
    cancel_event = threading.Event()
    call = partial(
        uc_q_list_paged,
        uow,
        uri_composer,
        page_index=page_index,
        page_size=page_size,
        brand_id=catalog_brand_id,
        type_id=catalog_type_id,
        correlation_id=request.state.correlation_id,
        cancel_event=cancel_event,
    )
    try:
        # abandon_on_cancel: o await termina logo ao cancelar, sem esperar pelo thread
        return await anyio.to_thread.run_sync(call, abandon_on_cancel=True)
    except anyio.get_cancelled_exc_class():
        # o worker thread pára no próximo checkpoint
        cancel_event.set()
        log.warning("Catalog listing cancelled by client")
        raise
