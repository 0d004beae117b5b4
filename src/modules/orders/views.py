"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet.  Service
errors are not caught here: the project exception handler maps their
``ErrorKind`` to a status code and renders the standard envelope.
"""

from __future__ import annotations

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.container import build_services
from modules.core.responses import success_response
from modules.core.validation import require_body
from modules.orders.serializers import (
    CreateOrderSerializer,
    OrderSerializer,
    OrderStatusSerializer,
)


class OrderViewSet(ViewSet):
    """ViewSet for Order operations.

    Uses the process-wide ``OrderService`` from ``build_services()``.
    Orders are never replaced wholesale: only their status changes.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_services().orders

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        parameters=[
            OpenApiParameter("customerEmail", str, required=False),
        ],
        responses=OrderSerializer(many=True),
    )
    def list(self, request: Request) -> Response:
        """GET /orders

        ``?customerEmail=`` narrows the result to one customer.
        """
        if "customerEmail" in request.query_params:
            orders = async_to_sync(self._service.list_orders_by_customer_email)(
                request.query_params.get("customerEmail")
            )
        else:
            orders = async_to_sync(self._service.list_orders)()
        return success_response(OrderSerializer(orders, many=True).data)

    @extend_schema(responses=OrderSerializer(many=True))
    @action(
        detail=False,
        methods=["get"],
        url_path=r"status/(?P<status_value>[^/]+)",
    )
    def by_status(self, request: Request, status_value: str) -> Response:
        """GET /orders/status/{status}"""
        orders = async_to_sync(self._service.list_orders_by_status)(status_value)
        return success_response(OrderSerializer(orders, many=True).data)

    @extend_schema(responses=OrderSerializer)
    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /orders/{pk}"""
        order = async_to_sync(self._service.get_order)(pk)
        return success_response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @extend_schema(request=CreateOrderSerializer, responses={201: OrderSerializer})
    def create(self, request: Request) -> Response:
        """POST /orders"""
        serializer = CreateOrderSerializer(data=require_body(request))
        serializer.is_valid(raise_exception=True)

        order = async_to_sync(self._service.create_order)(serializer.to_dto())
        return success_response(
            OrderSerializer(order).data,
            message="Order created successfully",
            status_code=status.HTTP_201_CREATED,
        )

    # ------------------------------------------------------------------
    # Status Update
    # ------------------------------------------------------------------

    @extend_schema(
        request=OrderStatusSerializer,
        parameters=[OpenApiParameter("status", str, required=False)],
        responses=OrderSerializer,
    )
    @action(detail=True, methods=["put"], url_path="status")
    def update_status(self, request: Request, pk: str) -> Response:
        """PUT /orders/{pk}/status

        The new status comes from the JSON body (``{"status": ...}``) or,
        failing that, from the ``?status=`` query parameter.
        """
        body = request.data if isinstance(request.data, dict) else {}
        serializer = OrderStatusSerializer(data=body)
        serializer.is_valid(raise_exception=True)

        new_status = serializer.validated_data.get("status")
        if not new_status:
            new_status = request.query_params.get("status")

        order = async_to_sync(self._service.update_order_status)(pk, new_status)
        return success_response(
            OrderSerializer(order).data, message="Order status updated successfully"
        )

    # ------------------------------------------------------------------
    # Cancel
    # ------------------------------------------------------------------

    @extend_schema(responses={204: None})
    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /orders/{pk}

        Cancels the order by removing it.
        """
        async_to_sync(self._service.cancel_order)(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
