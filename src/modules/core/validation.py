"""Request body helpers shared by the API views."""

from __future__ import annotations

from typing import Any

from rest_framework.request import Request

from modules.core.exceptions import EmptyRequestBody


def require_body(request: Request) -> Any:
    """Return ``request.data`` or raise ``EmptyRequestBody``.

    An absent body (or ``{}`` / ``[]``) is reported separately from a body
    that is present but invalid.  Malformed JSON never reaches this point:
    DRF raises ``ParseError`` while parsing.
    """
    data = request.data
    if data is None or (hasattr(data, "__len__") and len(data) == 0):
        raise EmptyRequestBody()
    return data
