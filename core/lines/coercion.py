"""
Conversion tolérante des saisies de formulaire.

Une ligne est éditée champ par champ, pendant la frappe : la valeur
reçue peut être vide ("") ou partielle ("12.", "3 pièces"). Ces
fonctions ne lèvent JAMAIS d'exception ; toute valeur inexploitable
devient 0.

    coerce_quantity("")        → 0
    coerce_quantity("3")       → 3
    coerce_quantity("3.7")     → 3
    coerce_quantity("abc")     → 0
    coerce_price("2,5")        → Decimal('2.5')
    coerce_price("-4")         → Decimal('0')

Une quantité est plafonnée à QUANTITY_CEILING (10**18) : au-delà, la
valeur reste 'trop élevée' pour l'enregistrement sans jamais dépasser
les limites de conversion d'int.
"""

import re
from decimal import Decimal, InvalidOperation

# Préfixe numérique en tête de chaîne (comme parseInt / parseFloat)
_INTEGER_PREFIX = re.compile(r'^\s*[+-]?\d+')
_DECIMAL_PREFIX = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)')

TRUE_STRINGS = {'1', 'true', 'on', 'yes', 'oui', 'vrai'}

ZERO = Decimal('0')

QUANTITY_CEILING = 10 ** 18
_MAX_INTEGER_DIGITS = 18


def coerce_quantity(raw) -> int:
    """Quantité entière >= 0."""
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return min(max(raw, 0), QUANTITY_CEILING)
    if isinstance(raw, (float, Decimal)):
        try:
            return min(max(int(raw), 0), QUANTITY_CEILING)
        except (ValueError, OverflowError, InvalidOperation):
            return 0

    match = _INTEGER_PREFIX.match(str(raw))
    if not match:
        return 0
    text = match.group(0).strip()
    if text.startswith('-'):
        return 0
    digits = text.lstrip('+').lstrip('0')
    if len(digits) > _MAX_INTEGER_DIGITS:
        return QUANTITY_CEILING
    return int(digits or '0')


def coerce_price(raw) -> Decimal:
    """Prix unitaire décimal >= 0 (virgule acceptée comme séparateur)."""
    if raw is None or isinstance(raw, bool):
        return ZERO
    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, (int, float)):
        try:
            value = Decimal(str(raw))
        except InvalidOperation:
            return ZERO
    else:
        match = _DECIMAL_PREFIX.match(str(raw).replace(',', '.'))
        if not match:
            return ZERO
        value = Decimal(match.group(0).strip())

    if not value.is_finite() or value < 0:
        return ZERO
    return value


def coerce_flag(raw) -> bool:
    """Case à cocher : bool, entier ou chaîne ('on', 'true', 'oui'...)."""
    if isinstance(raw, str):
        return raw.strip().lower() in TRUE_STRINGS
    return bool(raw)


def coerce_text(raw) -> str:
    if raw is None:
        return ''
    return str(raw)
