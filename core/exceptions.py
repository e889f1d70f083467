"""
Exceptions personnalisées du projet GestExport.

Toutes les erreurs de l'API ont le même format JSON :
    {"error": "<message lisible>", "code": "<code>"}
Le frontend affiche `error` tel quel à l'utilisateur.

Hiérarchie :
    BaseAPIException
    ├── ValidationError         (400)
    ├── AuthenticationError     (401)
    ├── PermissionDeniedError   (403)
    ├── NotFoundError           (404)
    ├── ConflictError           (409)
    └── BusinessLogicError      (422)
        ├── CatalogError
        └── DocumentLinesError
"""

import logging

from rest_framework.exceptions import APIException
from rest_framework import status

logger = logging.getLogger('gestexport.api')


# ============================================================
# EXCEPTION DE BASE
# ============================================================

class BaseAPIException(APIException):
    """
    Exception de base dont toutes les autres héritent.

    Exemple d'usage :
        raise BaseAPIException("Une erreur est survenue")
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Une erreur inattendue est survenue."
    default_code = "error"


# ============================================================
# ERREURS D'AUTHENTIFICATION ET PERMISSIONS
# ============================================================

class AuthenticationError(BaseAPIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Authentification requise."
    default_code = "authentication_required"


class PermissionDeniedError(BaseAPIException):
    """
    Levée quand l'utilisateur n'a pas les droits nécessaires.

    Exemple :
        if declaration.created_by != user:
            raise PermissionDeniedError("Cette déclaration ne vous appartient pas.")
    """
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Vous n'avez pas la permission d'effectuer cette action."
    default_code = "permission_denied"


# ============================================================
# ERREURS DE RESSOURCES
# ============================================================

class NotFoundError(BaseAPIException):
    """
    Levée quand une ressource n'existe pas (ou n'appartient pas à l'utilisateur).

    Exemple :
        client = Client.objects.owned_by(user).filter(id=pk).first()
        if not client:
            raise NotFoundError(f"Client {pk} introuvable.")
    """
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "La ressource demandée est introuvable."
    default_code = "not_found"


class ConflictError(BaseAPIException):
    """
    Levée quand il y a un conflit (ex: doublon).

    Exemple :
        if Commande.objects.filter(name=name, created_by=user).exists():
            raise ConflictError(f"La commande '{name}' existe déjà.")
    """
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Un conflit a été détecté avec une ressource existante."
    default_code = "conflict"


# ============================================================
# ERREURS DE VALIDATION
# ============================================================

class ValidationError(BaseAPIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Les données fournies sont invalides."
    default_code = "validation_error"


class BusinessLogicError(BaseAPIException):
    """
    Levée quand une règle métier est violée.

    Exemple :
        if len(name) > 60:
            raise BusinessLogicError("Le nom de la commande dépasse 60 caractères.")
    """
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = "L'opération viole une règle métier."
    default_code = "business_logic_error"


# ============================================================
# ERREURS MÉTIER
# ============================================================

class CatalogError(BusinessLogicError):
    """Modèle client incohérent (client inconnu, commandes invalides...)."""
    default_detail = "Le modèle client est invalide."
    default_code = "catalog_error"


class DocumentLinesError(BusinessLogicError):
    """Lignes d'un document (export, livraison) impossibles à enregistrer."""
    default_detail = "Les lignes du document sont invalides."
    default_code = "document_lines_error"


# ============================================================
# HANDLER GLOBAL POUR DRF
# ============================================================

def first_error_message(detail):
    """Premier message lisible d'un détail DRF (str, liste ou dict imbriqués)."""
    if isinstance(detail, dict):
        for key, value in detail.items():
            message = first_error_message(value)
            if message:
                return message if key == 'non_field_errors' else f"{key} : {message}"
        return ''
    if isinstance(detail, (list, tuple)):
        for value in detail:
            message = first_error_message(value)
            if message:
                return message
        return ''
    return str(detail)


def custom_exception_handler(exc, context):
    """
    Handler global qui intercepte toutes les exceptions et
    retourne une réponse JSON formatée de manière cohérente.

    Format de réponse :
    {
        "error": "La ressource est introuvable.",
        "code": "not_found",
        "details": {...}  // erreurs de validation par champ, optionnel
    }

    À déclarer dans settings.py :
        REST_FRAMEWORK = {
            'EXCEPTION_HANDLER': 'core.exceptions.custom_exception_handler'
        }
    """
    from django.core.exceptions import PermissionDenied
    from django.http import Http404
    from rest_framework.views import exception_handler

    # Erreurs Django levées par get_object() / les permissions : même format
    if isinstance(exc, Http404):
        exc = NotFoundError()
    elif isinstance(exc, PermissionDenied):
        exc = PermissionDeniedError()

    # Appeler d'abord le handler par défaut de DRF
    response = exception_handler(exc, context)

    if response is None:
        # Exception non gérée par DRF → 500, tracée par Django
        view = context.get('view')
        logger.error("Erreur non gérée dans %s : %r", view.__class__.__name__ if view else '?', exc)
        return None

    detail = getattr(exc, 'detail', None)
    data = {
        'error': first_error_message(detail) if detail is not None else str(exc),
        'code' : getattr(exc, 'default_code', 'error'),
    }
    if isinstance(detail, (dict, list)):
        data['details'] = response.data

    response.data = data
    return response
