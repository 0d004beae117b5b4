"""Document-store implementation of the Order repository.

Maps ``orders`` collection documents to ``Order`` models and back.
Missing documents are reported as ``None``.
"""

from __future__ import annotations

from typing import AsyncIterator, List, Optional

from modules.core.repositories.interfaces import DocumentDict, IDocumentStore
from modules.orders.constants import ORDERS_COLLECTION
from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository


async def _collect(documents: AsyncIterator[DocumentDict]) -> List[Order]:
    return [Order.model_validate(document) async for document in documents]


class OrderDocumentRepository(IOrderRepository):
    """Concrete Order repository backed by an ``IDocumentStore``."""

    def __init__(self, store: IDocumentStore) -> None:
        self._store = store

    async def get_by_id(self, id: str) -> Optional[Order]:
        document = await self._store.find_by_id(ORDERS_COLLECTION, id)
        return Order.model_validate(document) if document is not None else None

    async def list(self) -> List[Order]:
        return await _collect(self._store.find_all(ORDERS_COLLECTION))

    async def list_by_status(self, status: str) -> List[Order]:
        return await _collect(
            self._store.find_by_field(ORDERS_COLLECTION, "status", status)
        )

    async def list_by_customer_email(self, email: str) -> List[Order]:
        return await _collect(
            self._store.find_by_field(ORDERS_COLLECTION, "customer_email", email)
        )

    async def save(self, entity: Order) -> Order:
        document = await self._store.save(ORDERS_COLLECTION, entity.to_document())
        return Order.model_validate(document)

    async def delete(self, entity: Order) -> None:
        await self._store.delete(ORDERS_COLLECTION, entity.to_document())
