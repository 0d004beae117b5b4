from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.core"
    label = "core"

    def ready(self) -> None:
        from modules.core.container import build_services

        build_services()
