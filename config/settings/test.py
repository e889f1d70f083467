"""
Configuration Django : Environnement de test.

Usage :
    python manage.py test --settings=config.settings.test
    pytest --ds=config.settings.test
"""

from .base import *

DEBUG = False

# Base de données en mémoire
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME'  : ':memory:',
    }
}

CORS_ALLOW_ALL_ORIGINS = True

# Logs silencieux pendant les tests
LOGGING['root']['level'] = 'CRITICAL'
LOGGING['loggers']['gestexport']['level'] = 'CRITICAL'
LOGGING['loggers']['gestexport.lines']['level'] = 'CRITICAL'

# Hashage de mot de passe rapide
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]
