"""Storage contracts (Dependency Inversion Principle).

Provides:
- ``IDocumentStore``: asynchronous CRUD over named collections of JSON
  documents keyed by an opaque string id.  No transactions, no joins.
- ``IRepository[T]``: the base contract every aggregate repository
  extends.  Service-layer code depends on these abstractions, never on
  Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")

DocumentDict = Dict[str, Any]


class IDocumentStore(ABC):
    """Document store adapter contract.

    Documents are plain dicts.  ``id`` is assigned by the store on the
    first ``save`` and is a string thereafter.
    """

    @abstractmethod
    def find_all(self, collection: str) -> AsyncIterator[DocumentDict]:
        """Stream every document of ``collection``."""

    @abstractmethod
    async def find_by_id(self, collection: str, id: str) -> Optional[DocumentDict]:
        """Return the document with ``id`` or ``None``."""

    @abstractmethod
    def find_by_field(
        self, collection: str, field: str, value: Any
    ) -> AsyncIterator[DocumentDict]:
        """Stream documents whose top-level ``field`` equals ``value`` exactly."""

    @abstractmethod
    async def save(self, collection: str, document: DocumentDict) -> DocumentDict:
        """Insert (no ``id``) or replace (``id`` present) a document."""

    @abstractmethod
    async def delete(self, collection: str, document: DocumentDict) -> None:
        """Remove ``document`` from ``collection``."""


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the repository
    (e.g. ``Pizza``, ``Order``).
    """

    @abstractmethod
    async def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its identifier."""

    @abstractmethod
    async def list(self) -> List[T]:
        """List every entity."""

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Persist (create or replace) an entity."""

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """Remove an entity (hard delete)."""
