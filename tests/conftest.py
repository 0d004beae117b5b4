import pytest

from asgiref.sync import async_to_sync
from rest_framework.test import APIClient

from modules.core.container import build_services


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def margherita_payload():
    """Request body for the reference catalog pizza."""
    return {
        "name": "Margherita",
        "description": "Classic pizza with tomato sauce and mozzarella",
        "toppings": ["tomato sauce", "mozzarella", "basil"],
        "sizeOptions": ["small", "medium", "large"],
        "price": 9.99,
    }


@pytest.fixture()
def services():
    """Process-wide service container backed by the test database."""
    return build_services()


@pytest.fixture()
def run():
    """Drive a coroutine function from a sync test."""

    def _run(func, *args, **kwargs):
        return async_to_sync(func)(*args, **kwargs)

    return _run
