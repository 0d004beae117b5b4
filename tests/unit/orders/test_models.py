"""Unit tests for the Order model and its document mapping."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from asgiref.sync import async_to_sync
from pydantic import ValidationError

from modules.core.repositories import DjangoDocumentStore
from modules.orders.models import Order
from modules.orders.repositories import OrderDocumentRepository

pytestmark = pytest.mark.unit

TIMESTAMP = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


def _order(**overrides) -> Order:
    fields = {"pizzas": ["p1", "p2"], "status": "pending", "timestamp": TIMESTAMP}
    fields.update(overrides)
    return Order(**fields)


class TestOrderModel:
    def test_is_immutable(self):
        order = _order()
        with pytest.raises(ValidationError):
            order.status = "ready"

    def test_to_document_without_id(self):
        document = _order().to_document()
        assert "id" not in document
        assert document["timestamp"] == "2024-05-01T12:30:00Z"
        assert document["pizzas"] == ["p1", "p2"]

    def test_to_document_with_id(self):
        assert _order(id="o-1").to_document()["id"] == "o-1"

    def test_str(self):
        assert str(_order(id="o-1")) == "Order o-1 (pending)"


class TestOrderDocumentRepository:
    @pytest.fixture()
    def repository(self):
        return OrderDocumentRepository(DjangoDocumentStore())

    def test_round_trip(self, repository):
        saved = async_to_sync(repository.save)(
            _order(customer_email="ana@example.com", additional_attributes={"table": "7"})
        )

        loaded = async_to_sync(repository.get_by_id)(saved.id)

        assert loaded == saved
        assert loaded.timestamp == TIMESTAMP

    def test_list_by_status(self, repository):
        async_to_sync(repository.save)(_order(status="pending"))
        async_to_sync(repository.save)(_order(status="ready"))

        ready = async_to_sync(repository.list_by_status)("ready")

        assert [order.status for order in ready] == ["ready"]

    def test_list_by_customer_email(self, repository):
        async_to_sync(repository.save)(_order(customer_email="ana@example.com"))
        async_to_sync(repository.save)(_order(customer_email="bruno@example.com"))

        orders = async_to_sync(repository.list_by_customer_email)("ana@example.com")

        assert len(orders) == 1
        assert orders[0].customer_email == "ana@example.com"
