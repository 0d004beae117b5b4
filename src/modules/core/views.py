import time
from typing import Any, Dict

import structlog
from django.db import connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.request import Request
from rest_framework.response import Response

from modules.core.responses import ERROR, envelope, success_response

logger = structlog.get_logger()

ENDPOINTS = {
    "baseUrl": "/",
    "pizzas": {
        "category": "Pizzas Management",
        "baseEndpoint": "/pizzas",
        "availableEndpoints": [
            "GET /pizzas - Get all pizzas",
            "GET /pizzas/{id} - Get pizza by ID",
            "POST /pizzas - Create new pizza",
            "PUT /pizzas/{id} - Update pizza",
            "DELETE /pizzas/{id} - Delete pizza",
        ],
    },
    "orders": {
        "category": "Orders Management",
        "baseEndpoint": "/orders",
        "availableEndpoints": [
            "GET /orders - Get all orders (optional ?customerEmail=)",
            "GET /orders/status/{status} - Get orders by status",
            "GET /orders/{id} - Get order by ID",
            "POST /orders - Create new order",
            "PUT /orders/{id}/status - Update order status",
            "DELETE /orders/{id} - Cancel order",
        ],
    },
}


@api_view(["GET"])
def api_index(request: Request) -> Response:
    """List the available endpoints."""
    return success_response(ENDPOINTS)


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    # Check database (document store)
    try:
        start = time.monotonic()
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        services["database"] = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except Exception:
        services["database"] = {"status": "down"}
        overall_healthy = False
        logger.exception("health_check_db_failure")

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )


def not_found(request: HttpRequest, exception: Exception) -> JsonResponse:
    """``handler404``: unknown routes get the error envelope too."""
    return JsonResponse(
        envelope(ERROR, "Resource not found"), status=status.HTTP_404_NOT_FOUND
    )


def server_error(request: HttpRequest) -> JsonResponse:
    """``handler500``: never expose the failure, only the envelope."""
    return JsonResponse(
        envelope(ERROR, "An unexpected error occurred"),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
