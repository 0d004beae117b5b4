"""Error taxonomy and the DRF exception handler.

Every failure raised by the Service Layer carries an ``ErrorKind``.
The exception handler looks the kind up in ``STATUS_BY_KIND`` to pick
the HTTP status code, and always answers with the standard envelope
(see ``modules.core.responses``).  Unexpected exceptions are logged
with their traceback and reported with a generic message.
"""

from __future__ import annotations

import enum
import functools
from typing import Any, Awaitable, Callable, Dict, Iterator, Optional, Tuple, TypeVar

import structlog
from django.http import Http404
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response

from modules.core.responses import error_response

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    INTERNAL = "internal"


STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.METHOD_NOT_ALLOWED: status.HTTP_405_METHOD_NOT_ALLOWED,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


# ---------------------------------------------------------------------------
# Service errors
# ---------------------------------------------------------------------------


class ServiceError(Exception):
    """Base class for every error raised by the Service Layer."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationFailed(ServiceError):
    """Input is missing, empty or violates a business rule."""

    kind = ErrorKind.VALIDATION


class NotFound(ServiceError):
    """A referenced entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class InternalFailure(ServiceError):
    """The store or some other collaborator failed unexpectedly.

    ``message`` is a stable description of the failed operation; the
    underlying cause is chained (``__cause__``) but never exposed.
    """

    kind = ErrorKind.INTERNAL


class EmptyRequestBody(ValidationFailed):
    """The request carried no body where one is required."""

    def __init__(self, message: str = "Request body is empty") -> None:
        super().__init__(message)


def translate_failures(message: str) -> Callable[[F], F]:
    """Re-raise anything that is not a ``ServiceError`` as ``InternalFailure``.

    Usage::

        @translate_failures("Failed to create order")
        async def create_order(self, dto): ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except ServiceError:
                raise
            except Exception as exc:
                logger.exception(
                    "service.unexpected_error",
                    operation=func.__qualname__,
                    error_type=type(exc).__name__,
                )
                raise InternalFailure(message) from exc

        return wrapper  # type: ignore[return-value]

    return decorator


# ---------------------------------------------------------------------------
# Validation message aggregation
# ---------------------------------------------------------------------------


def _join(prefix: str, key: Any) -> str:
    if isinstance(key, int) or (isinstance(key, str) and key.isdigit()):
        return f"{prefix}[{key}]"
    return f"{prefix}.{key}" if prefix else str(key)


def flatten_errors(detail: Any, prefix: str = "") -> Iterator[str]:
    """Yield ``"field: reason"`` strings from a DRF error structure.

    Nested list entries are addressed as ``field[index]`` and nested
    mapping entries as ``field.key``.
    """
    if isinstance(detail, dict):
        for key, value in detail.items():
            yield from flatten_errors(value, _join(prefix, key))
    elif isinstance(detail, list):
        for item in detail:
            yield from flatten_errors(item, prefix)
    else:
        yield f"{prefix}: {detail}" if prefix else str(detail)


def validation_message(detail: Any) -> str:
    """Aggregate field errors into one comma-joined message."""
    return ", ".join(flatten_errors(detail))


# ---------------------------------------------------------------------------
# DRF exception handler
# ---------------------------------------------------------------------------


def classify(exc: Exception) -> Optional[Tuple[ErrorKind, str]]:
    """Map an exception to ``(kind, message)``.

    Returns ``None`` for exceptions that do not belong to the taxonomy
    and are not plain DRF ``APIException`` instances.
    """
    if isinstance(exc, ServiceError):
        return exc.kind, exc.message
    if isinstance(exc, drf_exceptions.ValidationError):
        return ErrorKind.VALIDATION, validation_message(exc.detail)
    if isinstance(exc, drf_exceptions.ParseError):
        return ErrorKind.VALIDATION, "Malformed request body"
    if isinstance(exc, drf_exceptions.MethodNotAllowed):
        return ErrorKind.METHOD_NOT_ALLOWED, str(exc.detail)
    if isinstance(exc, (Http404, drf_exceptions.NotFound)):
        return ErrorKind.NOT_FOUND, "Resource not found"
    return None


def envelope_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """DRF ``EXCEPTION_HANDLER`` producing the standard error envelope."""
    view = context.get("view")
    log = logger.bind(view=type(view).__name__ if view is not None else None)

    classified = classify(exc)
    if classified is not None:
        kind, message = classified
        status_code = STATUS_BY_KIND[kind]
        if kind is ErrorKind.INTERNAL:
            log.error("request.internal_error", message=message)
        else:
            log.warning("request.rejected", kind=kind.value, message=message)
        return error_response(message, status_code)

    if isinstance(exc, drf_exceptions.APIException):
        log.warning("request.rejected", status_code=exc.status_code)
        return error_response(str(exc.detail), exc.status_code)

    log.exception("request.unhandled_error", error_type=type(exc).__name__)
    return error_response(
        UNEXPECTED_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
