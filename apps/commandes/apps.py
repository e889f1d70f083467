from django.apps import AppConfig


class CommandesConfig(AppConfig):
    name               = 'apps.commandes'
    verbose_name       = 'Commandes'
    default_auto_field = 'django.db.models.BigAutoField'
