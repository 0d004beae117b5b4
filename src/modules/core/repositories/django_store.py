"""Django ORM implementation of the document store.

Satisfies ``IDocumentStore`` using the async QuerySet API, so every
call is a suspension point for the calling coroutine.  Lookups that
find nothing return ``None`` / an empty stream; deciding what a
missing document means is left to the Service Layer.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Optional

import structlog

from modules.core.models import Document
from modules.core.repositories.interfaces import DocumentDict, IDocumentStore

logger = structlog.get_logger(__name__)


class DjangoDocumentStore(IDocumentStore):
    """Concrete document store backed by the ``Document`` model."""

    async def find_all(self, collection: str) -> AsyncIterator[DocumentDict]:
        async for document in Document.objects.filter(collection=collection):
            yield document.as_dict()

    async def find_by_id(self, collection: str, id: str) -> Optional[DocumentDict]:
        document = await Document.objects.filter(collection=collection, id=id).afirst()
        return document.as_dict() if document is not None else None

    async def find_by_field(
        self, collection: str, field: str, value: Any
    ) -> AsyncIterator[DocumentDict]:
        """Exact, case-sensitive match on a top-level body key.

        Examples::

            store.find_by_field("pizzas", "name", "Margherita")
            store.find_by_field("orders", "status", "pending")
        """
        lookup = {f"body__{field}": value}
        queryset = Document.objects.filter(collection=collection, **lookup)
        async for document in queryset:
            yield document.as_dict()

    async def save(self, collection: str, document: DocumentDict) -> DocumentDict:
        body = {key: value for key, value in document.items() if key != "id"}
        document_id = document.get("id")

        if document_id:
            stored, created = await Document.objects.aupdate_or_create(
                id=document_id,
                defaults={"collection": collection, "body": body},
            )
        else:
            stored = Document(collection=collection, body=body)
            await stored.asave()
            created = True

        logger.info(
            "document.saved",
            collection=collection,
            document_id=stored.id,
            created=created,
        )
        return stored.as_dict()

    async def delete(self, collection: str, document: DocumentDict) -> None:
        deleted, _ = await Document.objects.filter(
            collection=collection, id=document["id"]
        ).adelete()
        logger.info(
            "document.deleted",
            collection=collection,
            document_id=document["id"],
            deleted=deleted,
        )
