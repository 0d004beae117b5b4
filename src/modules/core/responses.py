"""Uniform response envelope.

Every JSON body returned by the API has the shape::

    {"status": "success" | "error", "message": str, "data": T | null}
"""

from __future__ import annotations

from typing import Any, Dict

from rest_framework import status
from rest_framework.response import Response

SUCCESS = "success"
ERROR = "error"

DEFAULT_SUCCESS_MESSAGE = "Request processed successfully"


def envelope(status_value: str, message: str, data: Any = None) -> Dict[str, Any]:
    return {"status": status_value, "message": message, "data": data}


def success_response(
    data: Any,
    message: str = DEFAULT_SUCCESS_MESSAGE,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    return Response(envelope(SUCCESS, message, data), status=status_code)


def error_response(message: str, status_code: int) -> Response:
    return Response(envelope(ERROR, message), status=status_code)
