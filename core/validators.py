"""
Validateurs personnalisés du projet GestExport.

Un validateur reçoit une valeur, lève une ValidationError si la règle
est violée, et ne retourne rien sinon.

Attention : les champs de lignes (quantité, prix) ne sont PAS validés
ici. Ils sont convertis sans erreur par core.lines.coercion : une saisie
partielle ne doit jamais bloquer l'utilisateur.
"""

import re
from decimal import Decimal

from django.core.exceptions import ValidationError

from .constants import MAX_COMMANDE_NAME_LENGTH, VARIANT_SEPARATOR


def validate_non_negative(value):
    """
    ✅ 0, 12, 2.5
    ❌ -1, -0.01
    """
    if value is not None and value < 0:
        raise ValidationError(
            f"La valeur ne peut pas être négative. Valeur reçue : {value}"
        )


def validate_price(value):
    """Prix unitaire HT : décimal >= 0."""
    if value is None:
        return
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    if not value.is_finite() or value < 0:
        raise ValidationError(f"Prix invalide : {value}")


def validate_commande_name(value):
    """
    Nom de commande : non vide, 60 caractères max.

    ✅ "OPR3328", "Commande printemps 2024"
    ❌ "", "   ", "x" * 61
    """
    if not value or not value.strip():
        raise ValidationError("Le nom de la commande est obligatoire.")
    if len(value.strip()) > MAX_COMMANDE_NAME_LENGTH:
        raise ValidationError(
            f"Le nom de la commande ne peut pas dépasser {MAX_COMMANDE_NAME_LENGTH} caractères."
        )


def validate_commande_code(value):
    """
    Code commande d'un modèle client : pas de séparateur de variante ni de virgule
    (ils servent à combiner commandes et variantes).

    ✅ "OPR3328", "33"
    ❌ "OPR:1", "A,B"
    """
    if value and re.search(rf'[{re.escape(VARIANT_SEPARATOR)},]', value):
        raise ValidationError(
            f"Le code commande '{value}' ne peut contenir ni ':' ni ','."
        )
