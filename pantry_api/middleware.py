"""Request context middleware for the Pantry API."""

import time
import uuid
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
RESPONSE_TIME_HEADER = "X-Response-Time"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID, log it, and time it.

    An incoming X-Request-ID is reused so IDs can be correlated across
    services; otherwise a short one is generated. The ID is bound into
    structlog's context vars, so every log event emitted while handling the
    request carries it, store and connection events included.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        request.state.request_id = request_id

        start_time = time.perf_counter()
        with structlog.contextvars.bound_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        ):
            try:
                response = await call_next(request)
            except Exception:
                logger.exception("Request failed with unhandled exception")
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            if response.status_code >= 500:
                log = logger.error
            elif response.status_code >= 400:
                log = logger.warning
            else:
                log = logger.info
            log("Request completed", status_code=response.status_code, duration_ms=round(duration_ms, 2))

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[RESPONSE_TIME_HEADER] = f"{duration_ms:.2f}ms"
        return response
