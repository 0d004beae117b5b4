"""Pizza repository interface.

Extends ``IRepository[Pizza]`` with the name look-up required by the
catalog's uniqueness rule.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.pizzas.models import Pizza


class IPizzaRepository(IRepository["Pizza"]):
    """Repository contract for catalog pizzas."""

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Pizza]:
        """Retrieve a pizza by exact (case-sensitive) name."""
