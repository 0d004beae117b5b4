"""Pizza service layer (Catalog use cases).

Orchestrates business logic for catalog pizzas, delegating persistence
to the injected ``IPizzaRepository``.

Business rules enforced here:
- name, description, toppings, size options and price are required and
  must not be empty.
- price is at least 0.01.
- names are unique (exact, case-sensitive match) at creation time.
- updates replace the stored document wholesale; the name is not
  re-checked against other pizzas.
- deleting a pizza leaves orders that reference it untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

import structlog

from modules.core.exceptions import translate_failures
from modules.pizzas.constants import MIN_PRICE
from modules.pizzas.exceptions import InvalidPizza, PizzaAlreadyExists, PizzaNotFound
from modules.pizzas.models import Pizza

if TYPE_CHECKING:
    from modules.pizzas.dtos import CreatePizzaDTO, UpdatePizzaDTO
    from modules.pizzas.repositories.interfaces import IPizzaRepository

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS = ("name", "description", "toppings", "size_options", "price")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def validate_pizza_input(dto: CreatePizzaDTO) -> None:
    """Fail fast on missing fields before any store access.

    Raises:
        InvalidPizza: a required field is missing/empty or price < 0.01.
    """
    missing = [field for field in REQUIRED_FIELDS if _is_blank(getattr(dto, field))]
    if missing:
        raise InvalidPizza(f"Pizza fields are required: {', '.join(missing)}")
    if dto.price < MIN_PRICE:
        raise InvalidPizza(f"Price must be at least {MIN_PRICE}")


class PizzaService:
    """Application service for the pizza catalog.

    Receives an ``IPizzaRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IPizzaRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @translate_failures("Failed to create pizza")
    async def create_pizza(self, dto: CreatePizzaDTO) -> Pizza:
        """Create a pizza after enforcing required fields and name uniqueness.

        Raises:
            InvalidPizza: required field missing or empty.
            PizzaAlreadyExists: a pizza with the same name exists.
        """
        validate_pizza_input(dto)
        log = logger.bind(pizza_name=dto.name)

        if await self._repo.get_by_name(dto.name) is not None:
            log.warning("pizza.duplicate_name")
            raise PizzaAlreadyExists(f"Pizza with name '{dto.name}' already exists")

        pizza = await self._repo.save(Pizza(**dto.model_dump()))
        log.info("pizza.created", pizza_id=pizza.id)
        return pizza

    @translate_failures("Failed to update pizza")
    async def update_pizza(self, id: str, dto: UpdatePizzaDTO) -> Pizza:
        """Replace an existing pizza with the supplied fields.

        Raises:
            InvalidPizza: required field missing or empty.
            PizzaNotFound: the pizza does not exist.
        """
        validate_pizza_input(dto)

        existing = await self._repo.get_by_id(id)
        if existing is None:
            raise PizzaNotFound(id)

        pizza = await self._repo.save(Pizza(id=existing.id, **dto.model_dump()))
        logger.info("pizza.updated", pizza_id=pizza.id)
        return pizza

    @translate_failures("Failed to delete pizza")
    async def delete_pizza(self, id: str) -> None:
        """Delete a pizza.  Orders referencing it are not touched.

        Raises:
            PizzaNotFound: the pizza does not exist.
        """
        existing = await self._repo.get_by_id(id)
        if existing is None:
            raise PizzaNotFound(id)
        await self._repo.delete(existing)
        logger.info("pizza.deleted", pizza_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @translate_failures("Failed to fetch pizzas")
    async def list_pizzas(self) -> List[Pizza]:
        """Return every pizza in the catalog (possibly none)."""
        pizzas = await self._repo.list()
        logger.info("pizza.listed", count=len(pizzas))
        return pizzas

    @translate_failures("Failed to fetch pizza")
    async def get_pizza(self, id: str) -> Pizza:
        """Retrieve a single pizza by ID.

        Raises:
            PizzaNotFound: the pizza does not exist.
        """
        pizza = await self._repo.get_by_id(id)
        if pizza is None:
            raise PizzaNotFound(id)
        logger.debug("pizza.retrieved", pizza_id=id)
        return pizza
