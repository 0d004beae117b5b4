"""Tests for PizzaDocumentRepository against the document store."""

from __future__ import annotations

from decimal import Decimal

import pytest
from asgiref.sync import async_to_sync

from modules.core.models import Document
from modules.core.repositories import DjangoDocumentStore
from modules.pizzas.models import Pizza
from modules.pizzas.repositories import PizzaDocumentRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repository():
    return PizzaDocumentRepository(DjangoDocumentStore())


def _pizza(name="Margherita", price="9.99") -> Pizza:
    return Pizza(
        name=name,
        description="Classic pizza",
        toppings=["tomato sauce", "mozzarella"],
        size_options=["small", "large"],
        price=Decimal(price),
    )


class TestPizzaDocumentRepository:
    def test_save_assigns_id_and_keeps_fields(self, repository):
        saved = async_to_sync(repository.save)(_pizza())

        assert saved.id
        assert saved.model_dump(exclude={"id"}) == _pizza().model_dump(exclude={"id"})

    def test_document_uses_pizzas_collection(self, repository):
        saved = async_to_sync(repository.save)(_pizza())
        document = Document.objects.get(pk=saved.id)
        assert document.collection == "pizzas"
        assert document.body["size_options"] == ["small", "large"]
        assert document.body["price"] == "9.99"

    def test_get_by_id_round_trip(self, repository):
        saved = async_to_sync(repository.save)(_pizza())
        assert async_to_sync(repository.get_by_id)(saved.id) == saved

    def test_get_by_id_missing(self, repository):
        assert async_to_sync(repository.get_by_id)("missing") is None

    def test_get_by_name(self, repository):
        saved = async_to_sync(repository.save)(_pizza())
        assert async_to_sync(repository.get_by_name)("Margherita") == saved
        assert async_to_sync(repository.get_by_name)("MARGHERITA") is None

    def test_list(self, repository):
        async_to_sync(repository.save)(_pizza("Margherita"))
        async_to_sync(repository.save)(_pizza("Pepperoni"))

        names = [pizza.name for pizza in async_to_sync(repository.list)()]
        assert names == ["Margherita", "Pepperoni"]

    def test_delete(self, repository):
        saved = async_to_sync(repository.save)(_pizza())
        async_to_sync(repository.delete)(saved)
        assert async_to_sync(repository.get_by_id)(saved.id) is None
