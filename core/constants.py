"""
Constantes globales du projet GestExport.

Ce fichier centralise toutes les valeurs fixes du projet :
- Choix de champs (choices)
- Rôles utilisateurs
- Limites de longueur
- Valeurs par défaut des lignes de documents
"""

from decimal import Decimal


# ============================================================
# RÔLES UTILISATEURS
# ============================================================

ROLE_ADMIN        = 'admin'
ROLE_GESTIONNAIRE = 'gestionnaire'
ROLE_LECTEUR      = 'lecteur'

USER_ROLE_CHOICES = [
    (ROLE_ADMIN,        'Administrateur'),
    (ROLE_GESTIONNAIRE, 'Gestionnaire'),
    (ROLE_LECTEUR,      'Lecteur'),
]

WRITER_ROLES = [ROLE_ADMIN, ROLE_GESTIONNAIRE]


# ============================================================
# LIGNES DE DOCUMENTS
# ============================================================

# Valeurs d'une ligne ajoutée par l'utilisateur
DEFAULT_LINE_QUANTITY   = 1
DEFAULT_LINE_UNIT_PRICE = Decimal('0')

# Prix unitaires : stockés avec 4 décimales, montants affichés au centime
PRICE_MAX_DIGITS     = 14
PRICE_DECIMAL_PLACES = 4
AMOUNT_DECIMAL_PLACES = 2
CURRENCY_SYMBOL      = '€'

# Variantes : "COMMANDE:variante" (ex: "OPR3328:defaut")
VARIANT_SEPARATOR  = ':'
COMMANDES_SEPARATOR = ','


# ============================================================
# LIMITES ET SEUILS
# ============================================================

# Longueurs de champs
MAX_NAME_LENGTH          = 255
MAX_DESCRIPTION_LENGTH   = 2000
MAX_CODE_LENGTH          = 100
MAX_REFERENCE_LENGTH     = 100
MAX_COMMANDE_NAME_LENGTH = 60

# Sécurité
MAX_LOGIN_ATTEMPTS       = 5
LOCKOUT_DURATION_MINUTES = 30

# Appels HTTP sortants (secondes)
DEFAULT_HTTP_TIMEOUT = 30
