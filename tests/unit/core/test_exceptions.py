"""Unit tests for the error taxonomy and the envelope exception handler.

Covers:
- Kind to status code table.
- Field error aggregation (nested lists and mappings).
- ``translate_failures`` wrapping of unexpected exceptions.
- Handler output for service, DRF and unknown exceptions.
"""

from __future__ import annotations

import pytest
from asgiref.sync import async_to_sync
from django.http import Http404
from rest_framework import exceptions as drf_exceptions

from modules.core.exceptions import (
    STATUS_BY_KIND,
    EmptyRequestBody,
    ErrorKind,
    InternalFailure,
    NotFound,
    ServiceError,
    ValidationFailed,
    envelope_exception_handler,
    flatten_errors,
    translate_failures,
    validation_message,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Taxonomy
# ---------------------------------------------------------------------------


class TestErrorKinds:
    @pytest.mark.parametrize(
        "kind,expected",
        [
            (ErrorKind.VALIDATION, 400),
            (ErrorKind.NOT_FOUND, 404),
            (ErrorKind.METHOD_NOT_ALLOWED, 405),
            (ErrorKind.INTERNAL, 500),
        ],
    )
    def test_status_table(self, kind, expected):
        assert STATUS_BY_KIND[kind] == expected

    def test_every_kind_has_a_status(self):
        assert set(STATUS_BY_KIND) == set(ErrorKind)

    def test_subclasses_fix_the_kind(self):
        assert ValidationFailed("x").kind is ErrorKind.VALIDATION
        assert NotFound("x").kind is ErrorKind.NOT_FOUND
        assert InternalFailure("x").kind is ErrorKind.INTERNAL

    def test_empty_body_default_message(self):
        exc = EmptyRequestBody()
        assert exc.kind is ErrorKind.VALIDATION
        assert exc.message == "Request body is empty"


# ---------------------------------------------------------------------------
# Validation message aggregation
# ---------------------------------------------------------------------------


class TestFlattenErrors:
    def test_single_field(self):
        assert validation_message({"name": ["Name is required"]}) == "name: Name is required"

    def test_multiple_fields_joined_with_comma(self):
        message = validation_message(
            {"name": ["Name is required"], "price": ["Price is required"]}
        )
        assert message == "name: Name is required, price: Price is required"

    def test_list_entries_use_index(self):
        detail = {"toppings": {1: ["Topping must not be blank"]}}
        assert list(flatten_errors(detail)) == ["toppings[1]: Topping must not be blank"]

    def test_nested_mapping_uses_dot(self):
        detail = {"additionalAttributes": {"note": ["Not a valid string."]}}
        assert list(flatten_errors(detail)) == [
            "additionalAttributes.note: Not a valid string."
        ]

    def test_non_field_errors_without_prefix(self):
        assert validation_message(["Invalid data"]) == "Invalid data"


# ---------------------------------------------------------------------------
# translate_failures
# ---------------------------------------------------------------------------


class _Operations:
    @translate_failures("Failed to do the thing")
    async def boom(self):
        raise RuntimeError("connection reset")

    @translate_failures("Failed to do the thing")
    async def missing(self):
        raise NotFound("Thing not found")

    @translate_failures("Failed to do the thing")
    async def fine(self, value):
        return value * 2


class TestTranslateFailures:
    def test_unexpected_error_becomes_internal_failure(self):
        with pytest.raises(InternalFailure) as exc_info:
            async_to_sync(_Operations().boom)()
        assert exc_info.value.message == "Failed to do the thing"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_service_errors_pass_through(self):
        with pytest.raises(NotFound, match="Thing not found"):
            async_to_sync(_Operations().missing)()

    def test_return_value_preserved(self):
        assert async_to_sync(_Operations().fine)(21) == 42


# ---------------------------------------------------------------------------
# Exception handler
# ---------------------------------------------------------------------------


class TestEnvelopeExceptionHandler:
    def _handle(self, exc):
        return envelope_exception_handler(exc, {"view": None})

    def test_service_error_uses_kind(self):
        response = self._handle(NotFound("Pizza not found: 42"))
        assert response.status_code == 404
        assert response.data == {
            "status": "error",
            "message": "Pizza not found: 42",
            "data": None,
        }

    def test_drf_validation_error_aggregated(self):
        exc = drf_exceptions.ValidationError({"name": ["Name is required"]})
        response = self._handle(exc)
        assert response.status_code == 400
        assert response.data["message"] == "name: Name is required"

    def test_parse_error(self):
        response = self._handle(drf_exceptions.ParseError("JSON parse error"))
        assert response.status_code == 400
        assert response.data["message"] == "Malformed request body"

    def test_method_not_allowed(self):
        response = self._handle(drf_exceptions.MethodNotAllowed("PATCH"))
        assert response.status_code == 405
        assert response.data["status"] == "error"

    def test_django_404(self):
        response = self._handle(Http404())
        assert response.status_code == 404
        assert response.data["message"] == "Resource not found"

    def test_other_api_exception_keeps_status(self):
        response = self._handle(drf_exceptions.UnsupportedMediaType("text/plain"))
        assert response.status_code == 415
        assert response.data["status"] == "error"

    def test_unknown_exception_is_generic_500(self):
        response = self._handle(KeyError("secret internals"))
        assert response.status_code == 500
        assert response.data["message"] == "An unexpected error occurred"
        assert "secret" not in response.data["message"]

    def test_internal_failure_message_exposed(self):
        response = self._handle(InternalFailure("Failed to create order"))
        assert response.status_code == 500
        assert response.data["message"] == "Failed to create order"

    def test_base_service_error_is_internal(self):
        response = self._handle(ServiceError("boom"))
        assert response.status_code == 500
