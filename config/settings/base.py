"""
Configuration Django de base, commune à tous les environnements.

Ne jamais utiliser ce fichier directement.
Utiliser development.py, test.py ou production.py qui l'importent.

Variables d'environnement :
    SECRET_KEY              → Clé secrète Django (obligatoire en prod)
    DATABASE_URL            → URL PostgreSQL (prod)
    GESTEXPORT_HTTP_TIMEOUT → Délai max des appels HTTP sortants (secondes)
    CORS_ALLOWED_ORIGINS    → Origines du frontend (prod)
"""

import os
from pathlib import Path
from datetime import timedelta

# ── Chemins ──────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# ── Sécurité ─────────────────────────────────────────────────
SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-insecure-key-changeme-in-production')
DEBUG      = False  # Surchargé dans development.py

ALLOWED_HOSTS = []  # Surchargé dans chaque environnement

# ── Applications ─────────────────────────────────────────────
DJANGO_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
]

THIRD_PARTY_APPS = [
    'rest_framework',
    'rest_framework_simplejwt',
    'corsheaders',
    'django_filters',
]

LOCAL_APPS = [
    'core',
    'apps.authentication',
    'apps.clients',
    'apps.commandes',
    'apps.exports',
    'apps.livraisons',
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

# ── Modèle utilisateur ────────────────────────────────────────
AUTH_USER_MODEL = 'authentication.User'

# ── Middlewares ───────────────────────────────────────────────
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF    = 'config.urls'
WSGI_APPLICATION = 'config.wsgi.application'
ASGI_APPLICATION = 'config.asgi.application'

# ── Templates (admin uniquement) ──────────────────────────────
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS'   : [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

# ── Base de données (SQLite par défaut, override en prod) ─────
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME'  : BASE_DIR / 'db.sqlite3',
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# ── Validation des mots de passe ──────────────────────────────
AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
     'OPTIONS': {'min_length': 10}},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

# ── Internationalisation ──────────────────────────────────────
LANGUAGE_CODE = 'fr-fr'
TIME_ZONE     = 'Europe/Paris'
USE_I18N      = True
USE_TZ        = True

# ── Fichiers statiques ────────────────────────────────────────
STATIC_URL  = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# ── Django REST Framework ─────────────────────────────────────
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework_simplejwt.authentication.JWTAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'DEFAULT_FILTER_BACKENDS': [
        'django_filters.rest_framework.DjangoFilterBackend',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'EXCEPTION_HANDLER': 'core.exceptions.custom_exception_handler',
}

# ── JWT ───────────────────────────────────────────────────────
SIMPLE_JWT = {
    'ACCESS_TOKEN_LIFETIME'  : timedelta(minutes=60),
    'REFRESH_TOKEN_LIFETIME' : timedelta(days=1),
    'ROTATE_REFRESH_TOKENS'  : True,
    'ALGORITHM'              : 'HS256',
    'AUTH_HEADER_TYPES'      : ('Bearer',),
    'USER_ID_FIELD'          : 'id',
    'USER_ID_CLAIM'          : 'user_id',
}

# ── CORS ──────────────────────────────────────────────────────
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOWED_ORIGINS   = []  # Surchargé dans chaque environnement
CORS_ALLOW_METHODS = ['DELETE', 'GET', 'OPTIONS', 'PATCH', 'POST', 'PUT']

# ── GestExport ────────────────────────────────────────────────
# Délai des appels HTTP sortants (client API), en secondes
GESTEXPORT_HTTP_TIMEOUT = int(os.environ.get('GESTEXPORT_HTTP_TIMEOUT', 30))
# Longueur max du nom d'une commande
GESTEXPORT_COMMANDE_MAX_LENGTH = 60

# ── Sécurité des sessions ─────────────────────────────────────
SESSION_COOKIE_HTTPONLY = True
CSRF_COOKIE_HTTPONLY    = True

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    'version'                 : 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '[{levelname}] {asctime} {name} {module} : {message}',
            'style' : '{',
        },
        'simple': {
            'format': '[{levelname}] {asctime} {message}',
            'style' : '{',
        },
    },
    'handlers': {
        'console': {
            'class'    : 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level'   : 'WARNING',
    },
    'loggers': {
        'django': {
            'handlers' : ['console'],
            'level'    : 'WARNING',
            'propagate': False,
        },
        'gestexport': {
            'handlers' : ['console'],
            'level'    : 'INFO',
            'propagate': False,
        },
        'gestexport.lines': {
            'handlers' : ['console'],
            'level'    : 'WARNING',
            'propagate': False,
        },
    },
}
