"""Order service layer (Use Cases).

Orchestrates the order lifecycle: creation, status management and
cancellation.  Every pizza referenced by a new order is resolved
through ``PizzaService`` before anything is written, so an order is
either stored with only existing pizzas or not stored at all.

Business rules enforced:
- An order has at least one pizza (checked before any I/O).
- Missing/blank status defaults to ``pending``; other values must be
  one of the ``OrderStatus`` choices.
- ``timestamp`` is stamped by the server, whatever the client sent.
- Status transitions follow ``VALID_TRANSITIONS``.
- Cancellation removes the order document.

There is no transaction spanning pizza validation and the order write;
a pizza deleted in between is not detected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.utils import timezone

from modules.core.exceptions import translate_failures
from modules.orders.constants import OrderStatus
from modules.orders.exceptions import (
    CustomerEmailRequired,
    EmptyOrder,
    InvalidOrderStatus,
    OrderNotFound,
    StatusRequired,
)
from modules.orders.models import Order

if TYPE_CHECKING:
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.pizzas.services import PizzaService

logger = structlog.get_logger(__name__)


def normalize_status(value: Optional[str]) -> str:
    """Strip and lowercase a status value; ``None`` becomes ``""``.

    Raises:
        InvalidOrderStatus: ``value`` is neither ``None`` nor a string.
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidOrderStatus(f"Invalid order status '{value}'")
    return value.strip().lower()


def _require_known_status(status: str) -> str:
    if status not in OrderStatus.values:
        raise InvalidOrderStatus(
            f"Invalid order status '{status}'. "
            f"Expected one of: {', '.join(OrderStatus.values)}"
        )
    return status


class OrderService:
    """Application service for Order use-cases.

    Receives its repository and the catalog service via constructor
    injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        pizza_service: PizzaService,
    ) -> None:
        self._order_repo = order_repository
        self._pizza_service = pizza_service

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @translate_failures("Failed to create order")
    async def create_order(self, dto: CreateOrderDTO) -> Order:
        """Create a new order after validating every pizza reference.

        Steps:
        1. Reject an empty pizza list (no I/O yet).
        2. Default or validate the status.
        3. Resolve each distinct pizza id through the catalog.
        4. Stamp the server timestamp and persist.

        Raises:
            EmptyOrder: ``pizzas`` is missing or empty.
            InvalidOrderStatus: the status is not a known status.
            PizzaNotFound: a referenced pizza does not exist.
        """
        if not dto.pizzas:
            logger.warning("order.rejected_empty")
            raise EmptyOrder()

        status = normalize_status(dto.status) or OrderStatus.PENDING.value
        _require_known_status(status)

        log = logger.bind(pizza_count=len(dto.pizzas), status=status)
        log.info("order.creation_started")

        for pizza_id in dict.fromkeys(dto.pizzas):
            await self._pizza_service.get_pizza(pizza_id)

        order = Order(
            pizzas=list(dto.pizzas),
            status=status,
            timestamp=timezone.now(),
            customer_name=dto.customer_name,
            customer_email=dto.customer_email,
            customer_phone=dto.customer_phone,
            additional_attributes=dto.additional_attributes or {},
        )
        order = await self._order_repo.save(order)

        log.info("order.created", order_id=order.id)
        return order

    @translate_failures("Failed to update order status")
    async def update_order_status(self, order_id: str, new_status: Optional[str]) -> Order:
        """Move an order to ``new_status`` following the state machine.

        Raises:
            StatusRequired: ``new_status`` is missing or blank.
            InvalidOrderStatus: unknown status or disallowed transition.
            OrderNotFound: the order does not exist.
        """
        status = normalize_status(new_status)
        if not status:
            raise StatusRequired()
        _require_known_status(status)

        order = await self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(order_id)

        log = logger.bind(
            order_id=order_id,
            current_status=order.status,
            new_status=status,
        )

        if not order.can_transition_to(status):
            log.warning("order.invalid_transition")
            raise InvalidOrderStatus(
                f"Cannot transition from {order.status} to {status}"
            )

        order = await self._order_repo.save(order.model_copy(update={"status": status}))
        log.info("order.status_updated")
        return order

    @translate_failures("Failed to cancel order")
    async def cancel_order(self, order_id: str) -> None:
        """Cancel an order by removing it.

        Raises:
            OrderNotFound: the order does not exist.
        """
        order = await self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(order_id)

        await self._order_repo.delete(order)
        logger.info("order.cancelled", order_id=order_id, last_status=order.status)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @translate_failures("Failed to fetch orders")
    async def list_orders(self) -> List[Order]:
        """Return every order (possibly none)."""
        return await self._order_repo.list()

    @translate_failures("Failed to fetch orders by status")
    async def list_orders_by_status(self, status: Optional[str]) -> List[Order]:
        """Return orders with the given status.

        An unknown status is not an error: it simply matches nothing.

        Raises:
            StatusRequired: ``status`` is missing or blank.
        """
        value = normalize_status(status)
        if not value:
            raise StatusRequired()
        orders = await self._order_repo.list_by_status(value)
        logger.info("order.listed_by_status", status=value, count=len(orders))
        return orders

    @translate_failures("Failed to fetch orders by customer email")
    async def list_orders_by_customer_email(self, email: Optional[str]) -> List[Order]:
        """Return orders placed with the given customer e-mail.

        Raises:
            CustomerEmailRequired: ``email`` is missing or blank.
        """
        value = (email or "").strip()
        if not value:
            raise CustomerEmailRequired()
        orders = await self._order_repo.list_by_customer_email(value)
        logger.info("order.listed_by_customer", customer_email=value, count=len(orders))
        return orders

    @translate_failures("Failed to fetch order")
    async def get_order(self, order_id: str) -> Order:
        """Retrieve a single order by ID.

        Raises:
            OrderNotFound: the order does not exist.
        """
        order = await self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(order_id)
        return order
