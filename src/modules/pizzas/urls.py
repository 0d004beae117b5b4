"""Pizza URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.pizzas.views import PizzaViewSet

router = SimpleRouter(trailing_slash=False)
router.register("pizzas", PizzaViewSet, basename="pizza")

urlpatterns = router.urls
