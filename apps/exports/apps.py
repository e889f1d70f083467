from django.apps import AppConfig


class ExportsConfig(AppConfig):
    name               = 'apps.exports'
    verbose_name       = "Déclarations d'export"
    default_auto_field = 'django.db.models.BigAutoField'
