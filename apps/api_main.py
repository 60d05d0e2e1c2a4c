# apps/api_main.py
from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

# Routes
from app.api.v1.catalog_items import router as catalog_items_router
from app.api.v1.system import router as system_router

# Others
from app.core.config import settings
from app.core.http_errors import init_error_handlers
from app.core.logging import setup_logging
from app.core.middleware import RequestContextMiddleware

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.started_at = datetime.now(UTC)
    from app.models import create_db_and_tables
    from app.infra.session import SessionLocal
    from app.infra.bootstrap import ensure_catalog_seed

    create_db_and_tables()
    if settings.CATALOG_SEED_ON_STARTUP:
        ensure_catalog_seed(SessionLocal)
    yield


app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION, lifespan=lifespan)
app.add_middleware(RequestContextMiddleware)

init_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=settings.CORS_ORIGIN_REGEX,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
    allow_credentials=True,  # ecoa o Origin em vez de '*'
    expose_headers=["X-Correlation-ID"],
    max_age=86400,
)


# routers
app.include_router(system_router)
app.include_router(catalog_items_router, prefix="/api")
