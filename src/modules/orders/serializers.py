"""Order DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).  Business
logic lives in the Service Layer, which receives Pydantic DTOs from
``dtos.py``.  A client-supplied ``timestamp`` is not a declared field
and is therefore dropped here.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.constants import CUSTOMER_NAME_MAX_LENGTH, PHONE_PATTERN
from modules.orders.dtos import CreateOrderDTO

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class CreateOrderSerializer(serializers.Serializer):
    """Validates the order creation request payload."""

    pizzas = serializers.ListField(
        child=serializers.CharField(
            error_messages={"blank": "Pizza id must not be blank"},
        ),
        allow_empty=False,
        error_messages={
            "required": "List of pizzas is required",
            "null": "List of pizzas is required",
            "empty": "At least one pizza is required",
        },
    )
    status = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=20
    )
    customerName = serializers.CharField(
        source="customer_name",
        required=False,
        allow_null=True,
        allow_blank=True,
        max_length=CUSTOMER_NAME_MAX_LENGTH,
        error_messages={
            "max_length": "Customer name must not exceed 100 characters",
        },
    )
    customerEmail = serializers.EmailField(
        source="customer_email",
        required=False,
        allow_null=True,
        allow_blank=True,
        error_messages={"invalid": "Customer email must be a valid email address"},
    )
    customerPhone = serializers.RegexField(
        PHONE_PATTERN,
        source="customer_phone",
        required=False,
        allow_null=True,
        error_messages={
            "invalid": "Phone number must be 10-15 digits with an optional leading +",
        },
    )
    additionalAttributes = serializers.DictField(
        source="additional_attributes",
        child=serializers.CharField(allow_blank=True),
        required=False,
        allow_null=True,
    )

    def to_dto(self) -> CreateOrderDTO:
        data = dict(self.validated_data)
        # A blank e-mail means "not given"
        if not data.get("customer_email"):
            data["customer_email"] = None
        return CreateOrderDTO(**data)


class OrderStatusSerializer(serializers.Serializer):
    """Status update payload (``{"status": "..."}``).

    ``status`` may be omitted here: the view then falls back to the
    ``?status=`` query parameter, and the service reports a missing value.
    """

    status = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        max_length=20,
        error_messages={"invalid": "Status must be a string"},
    )


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class OrderSerializer(serializers.Serializer):
    """Read serializer for ``Order`` models."""

    id = serializers.CharField(read_only=True)
    pizzas = serializers.ListField(child=serializers.CharField(), read_only=True)
    status = serializers.CharField(read_only=True)
    timestamp = serializers.DateTimeField(read_only=True)
    customerName = serializers.CharField(source="customer_name", read_only=True)
    customerEmail = serializers.CharField(source="customer_email", read_only=True)
    customerPhone = serializers.CharField(source="customer_phone", read_only=True)
    additionalAttributes = serializers.DictField(
        source="additional_attributes",
        child=serializers.CharField(),
        read_only=True,
    )
