from django.apps import AppConfig


class PizzasConfig(AppConfig):
    name = "modules.pizzas"
    label = "pizzas"
