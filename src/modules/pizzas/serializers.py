"""Pizza DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views): it checks
field formats and sizes and exposes camelCase names.  Business rules
live in the Service Layer, which receives Pydantic DTOs from
``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.pizzas.constants import (
    DESCRIPTION_MAX_LENGTH,
    MIN_PRICE,
    NAME_MAX_LENGTH,
    TOPPING_MAX_LENGTH,
    PizzaSize,
)
from modules.pizzas.dtos import CreatePizzaDTO, UpdatePizzaDTO

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class PizzaInputSerializer(serializers.Serializer):
    """Validates the pizza create/replace payload."""

    name = serializers.CharField(
        max_length=NAME_MAX_LENGTH,
        error_messages={
            "required": "Name is required",
            "blank": "Name is required",
            "null": "Name is required",
            "max_length": "Name must be between 1 and 100 characters",
        },
    )
    description = serializers.CharField(
        max_length=DESCRIPTION_MAX_LENGTH,
        error_messages={
            "required": "Description is required",
            "blank": "Description is required",
            "null": "Description is required",
            "max_length": "Description must be between 1 and 500 characters",
        },
    )
    toppings = serializers.ListField(
        child=serializers.CharField(
            max_length=TOPPING_MAX_LENGTH,
            error_messages={
                "max_length": "Topping must not exceed 50 characters",
                "blank": "Topping must not be blank",
            },
        ),
        allow_empty=False,
        error_messages={
            "required": "Toppings are required",
            "null": "Toppings are required",
            "empty": "At least one topping is required",
        },
    )
    sizeOptions = serializers.ListField(
        source="size_options",
        child=serializers.ChoiceField(
            choices=PizzaSize.choices,
            error_messages={
                "invalid_choice": "Size must be small, medium, or large",
            },
        ),
        allow_empty=False,
        error_messages={
            "required": "Size options are required",
            "null": "Size options are required",
            "empty": "At least one size option is required",
        },
    )
    price = serializers.DecimalField(
        max_digits=None,
        decimal_places=None,
        min_value=MIN_PRICE,
        error_messages={
            "required": "Price is required",
            "null": "Price is required",
            "min_value": "Price must be at least 0.01",
        },
    )

    def to_create_dto(self) -> CreatePizzaDTO:
        return CreatePizzaDTO(**self.validated_data)

    def to_update_dto(self) -> UpdatePizzaDTO:
        return UpdatePizzaDTO(**self.validated_data)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class PizzaSerializer(serializers.Serializer):
    """Read serializer for ``Pizza`` models."""

    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    toppings = serializers.ListField(child=serializers.CharField(), read_only=True)
    sizeOptions = serializers.ListField(
        source="size_options", child=serializers.CharField(), read_only=True
    )
    price = serializers.DecimalField(
        max_digits=None, decimal_places=None, coerce_to_string=False, read_only=True
    )
