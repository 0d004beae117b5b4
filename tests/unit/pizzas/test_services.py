"""Unit tests for PizzaService.

Covers:
- Required fields and price floor, checked before any repository call.
- Exact-name uniqueness on creation.
- Wholesale replacement on update.
- NotFound on get/update/delete of unknown ids.
- Store failures surfacing as InternalFailure.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from asgiref.sync import async_to_sync

from modules.core.exceptions import ErrorKind, InternalFailure
from modules.pizzas.dtos import CreatePizzaDTO, UpdatePizzaDTO
from modules.pizzas.exceptions import InvalidPizza, PizzaAlreadyExists, PizzaNotFound
from modules.pizzas.models import Pizza
from modules.pizzas.repositories.interfaces import IPizzaRepository
from modules.pizzas.services import PizzaService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def _dto(**overrides) -> CreatePizzaDTO:
    fields = {
        "name": "Margherita",
        "description": "Classic pizza with tomato sauce and mozzarella",
        "toppings": ["tomato sauce", "mozzarella", "basil"],
        "size_options": ["small", "medium", "large"],
        "price": Decimal("9.99"),
    }
    fields.update(overrides)
    return CreatePizzaDTO(**fields)


@pytest.fixture()
def stored_pizza():
    return Pizza(id="pizza-1", **_dto().model_dump())


@pytest.fixture()
def repository():
    repo = AsyncMock(spec=IPizzaRepository)
    repo.get_by_name.return_value = None
    repo.save.side_effect = lambda pizza: pizza.model_copy(
        update={"id": pizza.id or "pizza-new"}
    )
    return repo


@pytest.fixture()
def service(repository):
    return PizzaService(repository=repository)


# ---------------------------------------------------------------------------
# create_pizza
# ---------------------------------------------------------------------------


class TestCreatePizza:
    def test_creates_and_returns_with_id(self, service, repository):
        pizza = async_to_sync(service.create_pizza)(_dto())

        assert pizza.id == "pizza-new"
        assert pizza.name == "Margherita"
        assert pizza.price == Decimal("9.99")
        repository.save.assert_awaited_once()

    @pytest.mark.parametrize(
        "field,value",
        [
            ("name", None),
            ("name", "   "),
            ("description", ""),
            ("toppings", []),
            ("size_options", None),
            ("price", None),
        ],
    )
    def test_missing_field_rejected_without_io(self, service, repository, field, value):
        with pytest.raises(InvalidPizza) as exc_info:
            async_to_sync(service.create_pizza)(_dto(**{field: value}))

        assert field in exc_info.value.message
        assert exc_info.value.kind is ErrorKind.VALIDATION
        repository.get_by_name.assert_not_awaited()
        repository.save.assert_not_awaited()

    def test_price_below_floor_rejected(self, service, repository):
        with pytest.raises(InvalidPizza, match="Price must be at least 0.01"):
            async_to_sync(service.create_pizza)(_dto(price=Decimal("0")))
        repository.save.assert_not_awaited()

    def test_duplicate_name_rejected(self, service, repository, stored_pizza):
        repository.get_by_name.return_value = stored_pizza

        with pytest.raises(PizzaAlreadyExists) as exc_info:
            async_to_sync(service.create_pizza)(_dto())

        assert exc_info.value.message == "Pizza with name 'Margherita' already exists"
        assert exc_info.value.kind is ErrorKind.VALIDATION
        repository.save.assert_not_awaited()

    def test_name_lookup_uses_exact_name(self, service, repository):
        async_to_sync(service.create_pizza)(_dto(name="margherita"))
        repository.get_by_name.assert_awaited_once_with("margherita")

    def test_store_failure_becomes_internal(self, service, repository):
        repository.save.side_effect = ConnectionError("store down")

        with pytest.raises(InternalFailure, match="Failed to create pizza"):
            async_to_sync(service.create_pizza)(_dto())


# ---------------------------------------------------------------------------
# update_pizza
# ---------------------------------------------------------------------------


class TestUpdatePizza:
    def test_replaces_fields_keeping_id(self, service, repository, stored_pizza):
        repository.get_by_id.return_value = stored_pizza
        dto = UpdatePizzaDTO(**_dto(price=Decimal("11.50"), toppings=["mozzarella"]).model_dump())

        pizza = async_to_sync(service.update_pizza)("pizza-1", dto)

        assert pizza.id == "pizza-1"
        assert pizza.price == Decimal("11.50")
        assert pizza.toppings == ["mozzarella"]

    def test_unknown_id_not_found(self, service, repository):
        repository.get_by_id.return_value = None

        with pytest.raises(PizzaNotFound) as exc_info:
            async_to_sync(service.update_pizza)("missing", UpdatePizzaDTO(**_dto().model_dump()))

        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        repository.save.assert_not_awaited()

    def test_validation_precedes_lookup(self, service, repository):
        with pytest.raises(InvalidPizza):
            async_to_sync(service.update_pizza)("missing", UpdatePizzaDTO(name="Only name"))
        repository.get_by_id.assert_not_awaited()


# ---------------------------------------------------------------------------
# delete_pizza / get_pizza / list_pizzas
# ---------------------------------------------------------------------------


class TestDeletePizza:
    def test_deletes_existing(self, service, repository, stored_pizza):
        repository.get_by_id.return_value = stored_pizza

        async_to_sync(service.delete_pizza)("pizza-1")

        repository.delete.assert_awaited_once_with(stored_pizza)

    def test_unknown_id_not_found(self, service, repository):
        repository.get_by_id.return_value = None

        with pytest.raises(PizzaNotFound):
            async_to_sync(service.delete_pizza)("missing")
        repository.delete.assert_not_awaited()


class TestQueries:
    def test_get_pizza(self, service, repository, stored_pizza):
        repository.get_by_id.return_value = stored_pizza
        assert async_to_sync(service.get_pizza)("pizza-1") == stored_pizza

    def test_get_pizza_not_found_message(self, service, repository):
        repository.get_by_id.return_value = None

        with pytest.raises(PizzaNotFound) as exc_info:
            async_to_sync(service.get_pizza)("abc")

        assert exc_info.value.message == "Pizza not found: abc"
        assert exc_info.value.pizza_id == "abc"

    def test_list_pizzas_empty(self, service, repository):
        repository.list.return_value = []
        assert async_to_sync(service.list_pizzas)() == []

    def test_list_failure_becomes_internal(self, service, repository):
        repository.list.side_effect = RuntimeError("cursor closed")

        with pytest.raises(InternalFailure, match="Failed to fetch pizzas"):
            async_to_sync(service.list_pizzas)()
