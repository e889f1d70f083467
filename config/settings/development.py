"""
Configuration Django : Environnement de développement local.

Usage :
    export DJANGO_SETTINGS_MODULE=config.settings.development
    python manage.py runserver
"""

from .base import *

# ── Dev ───────────────────────────────────────────────────────
DEBUG         = True
ALLOWED_HOSTS = ['*']

# ── Base de données : PostgreSQL local si DB_NAME est défini ──
if os.environ.get('DB_NAME'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.environ.get('DB_NAME'),
            'USER': os.environ.get('DB_USER', 'gestexport'),
            'PASSWORD': os.environ.get('DB_PASSWORD', 'gestexport'),
            'HOST': os.environ.get('DB_HOST', 'localhost'),
            'PORT': os.environ.get('DB_PORT', '5432'),
        }
    }

# ── CORS : tout autoriser en dev (frontend sur un autre port) ──
CORS_ALLOW_ALL_ORIGINS = True

# ── Sécurité : désactivée en dev ──────────────────────────────
SECURE_SSL_REDIRECT    = False
SESSION_COOKIE_SECURE  = False
CSRF_COOKIE_SECURE     = False

# ── JWT : tokens longs pour le confort du dev ─────────────────
SIMPLE_JWT = {
    **SIMPLE_JWT,
    'ACCESS_TOKEN_LIFETIME' : timedelta(hours=8),
    'REFRESH_TOKEN_LIFETIME': timedelta(days=7),
}

# ── Logs : verbeux en dev ─────────────────────────────────────
LOGGING['root']['level'] = 'DEBUG'
LOGGING['loggers']['django']['level'] = 'INFO'
LOGGING['loggers']['gestexport']['level'] = 'DEBUG'
LOGGING['loggers']['gestexport.lines']['level'] = 'DEBUG'

# ── Django REST Framework : browsable API activée en dev ──────
REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
        'rest_framework.renderers.BrowsableAPIRenderer',
    ],
}
