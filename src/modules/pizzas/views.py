"""Pizza API views.

Exposes the ``PizzaService`` via HTTP using a DRF ViewSet.  The service
is asynchronous; each action drives it with ``async_to_sync``.  Service
errors propagate to the project exception handler, which renders the
standard envelope.
"""

from __future__ import annotations

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.container import build_services
from modules.core.responses import success_response
from modules.core.validation import require_body
from modules.pizzas.serializers import PizzaInputSerializer, PizzaSerializer


class PizzaViewSet(ViewSet):
    """ViewSet for catalog CRUD.

    Uses the process-wide ``PizzaService`` from ``build_services()``.
    PATCH is not routed: updates are wholesale (PUT) only.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_services().pizzas

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses=PizzaSerializer(many=True))
    def list(self, request: Request) -> Response:
        """GET /pizzas"""
        pizzas = async_to_sync(self._service.list_pizzas)()
        return success_response(PizzaSerializer(pizzas, many=True).data)

    @extend_schema(responses=PizzaSerializer)
    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /pizzas/{pk}"""
        pizza = async_to_sync(self._service.get_pizza)(pk)
        return success_response(PizzaSerializer(pizza).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=PizzaInputSerializer, responses={201: PizzaSerializer})
    def create(self, request: Request) -> Response:
        """POST /pizzas"""
        serializer = PizzaInputSerializer(data=require_body(request))
        serializer.is_valid(raise_exception=True)

        pizza = async_to_sync(self._service.create_pizza)(serializer.to_create_dto())
        return success_response(
            PizzaSerializer(pizza).data,
            message="Pizza created successfully",
            status_code=status.HTTP_201_CREATED,
        )

    @extend_schema(request=PizzaInputSerializer, responses=PizzaSerializer)
    def update(self, request: Request, pk: str) -> Response:
        """PUT /pizzas/{pk}"""
        serializer = PizzaInputSerializer(data=require_body(request))
        serializer.is_valid(raise_exception=True)

        pizza = async_to_sync(self._service.update_pizza)(
            pk, serializer.to_update_dto()
        )
        return success_response(
            PizzaSerializer(pizza).data, message="Pizza updated successfully"
        )

    @extend_schema(responses={204: None})
    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /pizzas/{pk}"""
        async_to_sync(self._service.delete_pizza)(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
