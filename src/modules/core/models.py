"""Document storage model.

All collections (``pizzas``, ``orders``, ``config``) share one table:
a row per document, the document body kept as JSON and the opaque
string identifier as primary key.

Design decisions:
- Identifiers are UUIDv7 strings, so insertion order and id order agree.
- The ``id`` is never part of ``body``; the store adds it back on read.
- No foreign keys between documents; cross-document rules live in the
  Service Layer.
"""

from __future__ import annotations

import uuid6
from django.db import models


def new_document_id() -> str:
    return str(uuid6.uuid7())


class Document(models.Model):
    """A single JSON document inside a named collection."""

    id = models.CharField(
        primary_key=True,
        max_length=64,
        default=new_document_id,
        editable=False,
    )
    collection = models.CharField(max_length=64)
    body = models.JSONField(default=dict)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "documents"
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["collection"], name="documents_collection_idx"),
        ]

    def as_dict(self) -> dict:
        """Return the body with ``id`` folded in, as the store hands it out."""
        return {"id": self.id, **self.body}

    def __str__(self) -> str:
        return f"{self.collection}/{self.id}"
