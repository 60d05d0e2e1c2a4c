# app/core/middleware.py
"""
HTTP middleware para logging de requests e correlation id.
"""

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging import set_correlation_id

log = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

# Threshold for slow request warning (ms)
SLOW_REQUEST_MS = 2000


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        cid = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex
        set_correlation_id(cid)
        request.state.correlation_id = cid
        t0 = time.perf_counter()

        method = request.method
        path = request.url.path

        try:
            log.info("-> %s %s", method, path)

            try:
                response = await call_next(request)
            except Exception:
                # 500 sem corpo; o detalhe fica só no log do servidor
                dt = (time.perf_counter() - t0) * 1000
                log.exception("<- %s %s -> 500 %.0fms [unhandled]", method, path, dt)
                response = Response(status_code=500)
                response.headers[CORRELATION_HEADER] = cid
                return response

            dt = (time.perf_counter() - t0) * 1000
            response.headers[CORRELATION_HEADER] = cid

            status = response.status_code
            if status >= 500:
                log.error("<- %s %s -> %s %.0fms", method, path, status, dt)
            elif status >= 400:
                log.warning("<- %s %s -> %s %.0fms", method, path, status, dt)
            elif dt > SLOW_REQUEST_MS:
                log.warning("<- %s %s -> %s %.0fms [SLOW]", method, path, status, dt)
            else:
                log.info("<- %s %s -> %s %.0fms", method, path, status, dt)

            return response

        finally:
            set_correlation_id(None)
