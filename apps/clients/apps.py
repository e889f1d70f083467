from django.apps import AppConfig


class ClientsConfig(AppConfig):
    name               = 'apps.clients'
    verbose_name       = 'Clients et catalogue'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        import apps.clients.signals  # noqa: F401
