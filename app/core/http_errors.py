# app/core/http_errors.py
"""
Handlers de exceções para a app FastAPI.

AppErrors 5xx são registados com detalhe completo no servidor e devolvidos
ao cliente como 500 sem corpo. Erros 4xx devolvem {code, detail}.
Exceções não tratadas são respondidas pelo RequestContextMiddleware.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from app.core.errors import AppError

log = logging.getLogger(__name__)


def _internal_error() -> Response:
    return Response(status_code=500)


async def _handle_app_error(request: Request, exc: AppError) -> Response:
    if exc.http_status >= 500:
        log.error(
            "%s %s failed [%s]: %s",
            request.method,
            request.url.path,
            exc.code,
            exc.detail,
            exc_info=exc,
        )
        return _internal_error()

    log.warning("%s %s -> %s [%s]", request.method, request.url.path, exc.http_status, exc.code)
    return JSONResponse(
        status_code=exc.http_status,
        content={"code": exc.code, "detail": exc.detail},
    )


def init_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, _handle_app_error)
