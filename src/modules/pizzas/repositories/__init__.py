"""Pizza repositories package."""

from modules.pizzas.repositories.document_repository import PizzaDocumentRepository
from modules.pizzas.repositories.interfaces import IPizzaRepository

__all__ = ["IPizzaRepository", "PizzaDocumentRepository"]
