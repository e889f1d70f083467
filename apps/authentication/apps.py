"""
Configuration de l'application Authentication.
"""

from django.apps import AppConfig


class AuthenticationConfig(AppConfig):
    name               = 'apps.authentication'
    label              = 'authentication'
    verbose_name       = 'Authentification'
    default_auto_field = 'django.db.models.BigAutoField'
