"""Pizza document model.

Pizzas are stored as documents in the ``pizzas`` collection; this
Pydantic model is the typed view of such a document.  It is immutable:
updates build a new instance (``model_copy``) and replace the stored
document wholesale.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class Pizza(BaseModel):
    """A catalog entry.

    ``id`` is ``None`` until the store assigns one on first save.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: str
    description: str
    toppings: List[str]
    size_options: List[str]
    price: Decimal

    def to_document(self) -> dict:
        document = self.model_dump(mode="json", exclude={"id"})
        if self.id is not None:
            document["id"] = self.id
        return document

    def __str__(self) -> str:
        return f"{self.name} ({self.price})"
