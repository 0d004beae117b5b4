"""Pizza DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  They only
describe the *shape* of the input; required-ness and business rules are
checked by ``PizzaService`` so that direct callers get the same errors
as HTTP clients.  DTOs are immutable (``frozen=True``).
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class CreatePizzaDTO(BaseModel):
    """Immutable DTO for pizza creation requests."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    description: Optional[str] = None
    toppings: Optional[List[str]] = None
    size_options: Optional[List[str]] = None
    price: Optional[Decimal] = None


class UpdatePizzaDTO(CreatePizzaDTO):
    """Immutable DTO for wholesale pizza replacement.

    Same fields as creation: an update replaces the whole document.
    """
