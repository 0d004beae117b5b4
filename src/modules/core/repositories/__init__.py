"""Core storage package."""

from modules.core.repositories.django_store import DjangoDocumentStore
from modules.core.repositories.interfaces import IDocumentStore, IRepository

__all__ = ["DjangoDocumentStore", "IDocumentStore", "IRepository"]
