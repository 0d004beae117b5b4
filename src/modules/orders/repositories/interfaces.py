"""Order repository interface.

Extends ``IRepository[Order]`` with the filtered look-ups the order
endpoints need (by status, by customer e-mail).

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate."""

    @abstractmethod
    async def list_by_status(self, status: str) -> List[Order]:
        """List orders whose status equals ``status`` exactly."""

    @abstractmethod
    async def list_by_customer_email(self, email: str) -> List[Order]:
        """List orders placed with the given customer e-mail."""
