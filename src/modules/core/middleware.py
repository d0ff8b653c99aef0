import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger(__name__)


class RequestContextMiddleware:
    """Binds a per-request correlation ID into the structlog context.

    The ID comes from the ``X-Request-ID`` header or, when absent, a fresh
    UUID4. It is echoed back in the response header and appears on every
    log line emitted while the request is being served, including the
    ``request.started`` / ``request.finished`` pair logged here.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        log = logger.bind(method=request.method, path=request.get_full_path())
        log.info("request.started")
        started = time.monotonic()

        response = self.get_response(request)

        log.info(
            "request.finished",
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - started) * 1000, 2),
        )

        response[REQUEST_ID_HEADER] = request_id
        return response
