"""Pizza catalog constants."""

from decimal import Decimal

from django.db import models

PIZZAS_COLLECTION = "pizzas"


class PizzaSize(models.TextChoices):
    SMALL = "small", "Small"
    MEDIUM = "medium", "Medium"
    LARGE = "large", "Large"


NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
TOPPING_MAX_LENGTH = 50
MIN_PRICE = Decimal("0.01")
