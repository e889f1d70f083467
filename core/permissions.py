"""
Permissions personnalisées du projet GestExport.

Django REST Framework appelle has_permission() AVANT la vue,
et has_object_permission() APRÈS avoir récupéré l'objet.

Usage dans une vue :
    class LivraisonViewSet(viewsets.ModelViewSet):
        permission_classes = [IsAuthenticated, IsGestionnaireOrReadOnly, IsOwnerOrAdmin]
"""

from rest_framework.permissions import BasePermission, SAFE_METHODS
from .constants import ROLE_ADMIN, WRITER_ROLES


class IsGestionnaireOrReadOnly(BasePermission):
    """
    Lecture pour tous les authentifiés, écriture pour gestionnaires et admins.
    """
    message = "La modification est réservée aux gestionnaires."

    def has_permission(self, request, view):
        if not request.user.is_authenticated:
            return False

        if request.method in SAFE_METHODS:
            return True

        return getattr(request.user, 'role', None) in WRITER_ROLES


class IsOwnerOrAdmin(BasePermission):
    """
    Accès à un objet réservé à son créateur (ou à un admin).

    Note : Nécessite que le modèle ait un champ 'created_by'.
    """
    message = "Vous ne pouvez accéder qu'à vos propres ressources."

    def has_object_permission(self, request, view, obj):
        if getattr(request.user, 'role', None) == ROLE_ADMIN:
            return True
        return getattr(obj, 'created_by_id', None) == request.user.pk
