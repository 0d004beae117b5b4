"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.  The
``ErrorKind`` of the base class decides the HTTP status code.
"""

from __future__ import annotations

from modules.core.exceptions import NotFound, ValidationFailed


class OrderNotFound(NotFound):
    """The requested order does not exist."""

    def __init__(self, order_id: str) -> None:
        self.order_id = order_id
        super().__init__(f"Order not found with id: {order_id}")


class EmptyOrder(ValidationFailed):
    """An order was submitted without any pizza."""

    def __init__(self) -> None:
        super().__init__("At least one pizza is required")


class StatusRequired(ValidationFailed):
    """A status argument was missing or blank."""

    def __init__(self) -> None:
        super().__init__("Status is required")


class InvalidOrderStatus(ValidationFailed):
    """An unknown status or a disallowed status transition."""


class CustomerEmailRequired(ValidationFailed):
    """A customer e-mail filter was missing or blank."""

    def __init__(self) -> None:
        super().__init__("Customer email is required")
