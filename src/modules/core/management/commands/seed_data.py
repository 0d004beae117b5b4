from __future__ import annotations

from contextlib import aclosing
from decimal import Decimal
from typing import List

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand

from modules.core.container import build_services
from modules.orders.constants import OrderStatus
from modules.orders.dtos import CreateOrderDTO
from modules.pizzas.dtos import CreatePizzaDTO
from modules.pizzas.models import Pizza

CONFIG_COLLECTION = "config"
INITIALIZED_KEY = "isInitialized"

SEED_PIZZAS = [
    (
        "Margherita",
        "Classic tomato, mozzarella and fresh basil",
        ["tomato sauce", "mozzarella", "basil"],
        Decimal("9.99"),
    ),
    (
        "Pepperoni",
        "Spicy pepperoni over a cheesy base",
        ["tomato sauce", "mozzarella", "pepperoni"],
        Decimal("11.49"),
    ),
    (
        "Quattro Formaggi",
        "Four cheeses on a white base",
        ["mozzarella", "gorgonzola", "parmesan", "fontina"],
        Decimal("12.99"),
    ),
    (
        "Vegetariana",
        "Grilled vegetables and olives",
        ["tomato sauce", "mozzarella", "peppers", "zucchini", "olives"],
        Decimal("10.99"),
    ),
    (
        "Hawaiian",
        "Ham and pineapple",
        ["tomato sauce", "mozzarella", "ham", "pineapple"],
        Decimal("10.49"),
    ),
]

SEED_CUSTOMERS = [
    ("Ana Souza", "ana@example.com", "+5511999990001"),
    ("Bruno Lima", "bruno@example.com", "+5511999990002"),
    ("Carla Mendes", "carla@example.com", "+5511999990003"),
    ("Daniel Costa", "daniel@example.com", "+5511999990004"),
]


class Command(BaseCommand):
    help = "Seed the document store with sample pizzas and orders."

    def add_arguments(self, parser):
        parser.add_argument(
            "--force",
            action="store_true",
            help="Seed again even if the store is already initialized.",
        )

    def handle(self, *args, **options):
        async_to_sync(self._seed)(force=options["force"])

    async def _seed(self, force: bool) -> None:
        services = build_services()
        store = services.store

        flag = await self._initialized_flag(store)
        if flag is not None and flag.get("value") and not force:
            self.stdout.write("Store already initialized, skipping seed.")
            return

        self.stdout.write("Seeding development data...")
        pizzas = await self._seed_pizzas(services)
        orders_created = await self._seed_orders(services, pizzas)

        await store.save(
            CONFIG_COLLECTION,
            {**(flag or {}), "key": INITIALIZED_KEY, "value": True},
        )

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: pizzas={len(pizzas)}, orders={orders_created}"
            )
        )

    async def _initialized_flag(self, store):
        matches = store.find_by_field(CONFIG_COLLECTION, "key", INITIALIZED_KEY)
        async with aclosing(matches) as documents:
            async for document in documents:
                return document
        return None

    async def _seed_pizzas(self, services) -> List[Pizza]:
        self.stdout.write("Creating pizzas...")
        existing = {pizza.name: pizza for pizza in await services.pizzas.list_pizzas()}
        pizzas: List[Pizza] = []
        for name, description, toppings, price in SEED_PIZZAS:
            pizza = existing.get(name)
            if pizza is None:
                pizza = await services.pizzas.create_pizza(
                    CreatePizzaDTO(
                        name=name,
                        description=description,
                        toppings=toppings,
                        size_options=["small", "medium", "large"],
                        price=price,
                    )
                )
            pizzas.append(pizza)
        return pizzas

    async def _seed_orders(self, services, pizzas: List[Pizza]) -> int:
        self.stdout.write("Creating orders...")
        statuses = [
            OrderStatus.PENDING,
            OrderStatus.PREPARING,
            OrderStatus.READY,
            OrderStatus.DELIVERED,
        ]
        for index, (name, email, phone) in enumerate(SEED_CUSTOMERS):
            picked = [pizzas[index % len(pizzas)].id, pizzas[(index + 1) % len(pizzas)].id]
            await services.orders.create_order(
                CreateOrderDTO(
                    pizzas=picked,
                    status=statuses[index].value,
                    customer_name=name,
                    customer_email=email,
                    customer_phone=phone,
                    additional_attributes={"source": "seed"},
                )
            )
        return len(SEED_CUSTOMERS)
