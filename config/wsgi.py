"""
Point d'entrée WSGI, utilisé par Gunicorn en production.

    ENVIRONMENT=production gunicorn config.wsgi:application

Le module de settings est choisi par config/settings/__init__.py.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

application = get_wsgi_application()
