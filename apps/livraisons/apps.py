from django.apps import AppConfig


class LivraisonsConfig(AppConfig):
    name               = 'apps.livraisons'
    verbose_name       = 'Livraisons'
    default_auto_field = 'django.db.models.BigAutoField'
