from django.urls import path

from modules.core.views import api_index, health_check

urlpatterns = [
    path("", api_index, name="api_index"),
    path("health", health_check, name="health_check"),
]
