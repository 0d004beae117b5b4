"""Pizza catalog exceptions.

Raised by the Service Layer when business rules are violated.  Each one
carries an ``ErrorKind`` through its base class; the API layer turns the
kind into an HTTP status code.
"""

from __future__ import annotations

from modules.core.exceptions import NotFound, ValidationFailed


class PizzaNotFound(NotFound):
    """The requested pizza does not exist."""

    def __init__(self, pizza_id: str) -> None:
        self.pizza_id = pizza_id
        super().__init__(f"Pizza not found: {pizza_id}")


class PizzaAlreadyExists(ValidationFailed):
    """A pizza with exactly the same name is already in the catalog."""


class InvalidPizza(ValidationFailed):
    """Required pizza fields are missing, empty or out of range."""
