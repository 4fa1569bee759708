from django.apps import AppConfig


class CoreConfig(AppConfig):
    name = "modules.core"
    label = "core"

    def ready(self) -> None:
        # Registers the OpenAPI security scheme for ApiKeyAuthentication.
        import modules.core.schema  # noqa: F401
