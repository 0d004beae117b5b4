"""Document-store implementation of the Pizza repository.

Maps ``pizzas`` collection documents to ``Pizza`` models and back.
Missing documents are reported as ``None``; the Service Layer decides
how to translate that into an error.
"""

from __future__ import annotations

from contextlib import aclosing
from typing import List, Optional

from modules.core.repositories.interfaces import IDocumentStore
from modules.pizzas.constants import PIZZAS_COLLECTION
from modules.pizzas.models import Pizza
from modules.pizzas.repositories.interfaces import IPizzaRepository


class PizzaDocumentRepository(IPizzaRepository):
    """Concrete Pizza repository backed by an ``IDocumentStore``."""

    def __init__(self, store: IDocumentStore) -> None:
        self._store = store

    async def get_by_id(self, id: str) -> Optional[Pizza]:
        document = await self._store.find_by_id(PIZZAS_COLLECTION, id)
        return Pizza.model_validate(document) if document is not None else None

    async def get_by_name(self, name: str) -> Optional[Pizza]:
        matches = self._store.find_by_field(PIZZAS_COLLECTION, "name", name)
        async with aclosing(matches) as documents:
            async for document in documents:
                return Pizza.model_validate(document)
        return None

    async def list(self) -> List[Pizza]:
        return [
            Pizza.model_validate(document)
            async for document in self._store.find_all(PIZZAS_COLLECTION)
        ]

    async def save(self, entity: Pizza) -> Pizza:
        document = await self._store.save(PIZZAS_COLLECTION, entity.to_document())
        return Pizza.model_validate(document)

    async def delete(self, entity: Pizza) -> None:
        await self._store.delete(PIZZAS_COLLECTION, entity.to_document())
