"""Order document model.

Orders are stored as documents in the ``orders`` collection.  ``Order``
is the typed, immutable view of such a document; status changes build
a new instance with ``model_copy``.

- ``pizzas`` holds catalog pizza ids, validated at creation time only
  (no cascade when a pizza is later deleted).
- ``timestamp`` is always set by the server.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from modules.orders.constants import TERMINAL_STATES, VALID_TRANSITIONS


class Order(BaseModel):
    """Order aggregate."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    pizzas: List[str]
    status: str
    timestamp: datetime
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    additional_attributes: Dict[str, str] = Field(default_factory=dict)

    # ------------------------------------------------------------------
    # State Machine helpers
    # ------------------------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        """Return ``True`` if the order is in a terminal state."""
        return self.status in TERMINAL_STATES

    def can_transition_to(self, new_status: str) -> bool:
        """Check whether transitioning to *new_status* is valid."""
        allowed = VALID_TRANSITIONS.get(self.status, set())
        return new_status in allowed

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_document(self) -> dict:
        document = self.model_dump(mode="json", exclude={"id"})
        if self.id is not None:
            document["id"] = self.id
        return document

    def __str__(self) -> str:
        return f"Order {self.id} ({self.status})"
