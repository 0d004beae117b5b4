"""Explicit service wiring.

``build_services()`` constructs the document store, the repositories and
the services once per process and hands out the same instances on every
call.  Views and management commands take their services from here.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from modules.core.repositories.django_store import DjangoDocumentStore
from modules.core.repositories.interfaces import IDocumentStore
from modules.orders.repositories.document_repository import OrderDocumentRepository
from modules.orders.services import OrderService
from modules.pizzas.repositories.document_repository import PizzaDocumentRepository
from modules.pizzas.services import PizzaService


@dataclass(frozen=True)
class Services:
    store: IDocumentStore
    pizzas: PizzaService
    orders: OrderService


def wire_services(store: IDocumentStore) -> Services:
    """Build the service graph on top of ``store``."""
    pizzas = PizzaService(repository=PizzaDocumentRepository(store))
    orders = OrderService(
        order_repository=OrderDocumentRepository(store),
        pizza_service=pizzas,
    )
    return Services(store=store, pizzas=pizzas, orders=orders)


@lru_cache(maxsize=None)
def build_services() -> Services:
    return wire_services(DjangoDocumentStore())
