"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  These are
the contracts between the API layer (DRF Serializers) and the Service
layer.  DTOs are immutable (``frozen=True``).

``CreateOrderDTO`` has no ``timestamp``: the creation time is always
stamped by ``OrderService``.  Required-ness of ``pizzas`` and status
defaulting are Service Layer rules, so both fields are optional here.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests."""

    model_config = ConfigDict(frozen=True)

    pizzas: Optional[List[str]] = None
    status: Optional[str] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    additional_attributes: Optional[Dict[str, str]] = None
