import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger(__name__)


def _request_id(request: HttpRequest) -> str:
    return request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())


class CorrelationIdMiddleware:
    """Tag every request with a correlation id and log its outcome.

    The id comes from the ``X-Request-ID`` header or is a fresh UUID4.
    It is bound into structlog's context variables, so every log line
    emitted while serving the request (services included) carries it,
    and it is echoed back in the response header.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = _request_id(request)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        log = logger.bind(method=request.method, path=request.get_full_path())
        log.info("request_started")
        started = time.monotonic()

        response = self.get_response(request)

        log.info(
            "request_finished",
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - started) * 1000, 2),
        )
        response[REQUEST_ID_HEADER] = cid
        return response
