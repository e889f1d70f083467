"""
Fonctions utilitaires du projet GestExport.

Fonctions "helper" sans état :
- Pas de modèles
- Pas d'effets de bord
- Entrée → Traitement → Sortie
"""

from datetime import date, datetime
from typing import Optional


# ============================================================
# PARAMÈTRES DE REQUÊTE
# ============================================================

def parse_date(value) -> Optional[date]:
    """
    Convertit un paramètre 'YYYY-MM-DD' en date. Retourne None si vide ou invalide.

    Usage :
        parse_date('2024-03-01')   # → date(2024, 3, 1)
        parse_date('')             # → None
        parse_date('01/03/2024')   # → None
    """
    if not value:
        return None
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), '%Y-%m-%d').date()
    except ValueError:
        return None


def split_commandes(value: str, separator: str = ',') -> list:
    """
    Découpe une chaîne de commandes combinées.

    Usage :
        split_commandes('OPR1, OPR2,,')   # → ['OPR1', 'OPR2']
    """
    if not value:
        return []
    return [part.strip() for part in value.split(separator) if part.strip()]
