"""
Managers personnalisés du projet GestExport.

Deux filtres reviennent dans toutes les vues :
- exclure les objets supprimés (soft delete)
- ne montrer à un utilisateur que SES données (created_by)

Exemple sans manager custom :
    # À écrire dans CHAQUE vue → source d'oublis
    Client.objects.filter(is_deleted=False, created_by=request.user)

Exemple avec manager custom :
    Client.objects.owned_by(request.user)
"""

from django.db import models
from django.utils import timezone


# ============================================================
# QUERYSET DE BASE
# ============================================================

class OwnedQuerySet(models.QuerySet):
    """
    QuerySet avec soft delete et filtre par propriétaire.

    Chaînable : Client.objects.owned_by(user).created_between(debut, fin)
    """

    def delete(self):
        """
        Suppression logique de tout le QuerySet en une requête :
            UPDATE ... SET is_deleted=True, deleted_at=NOW() WHERE ...
        """
        return self.update(
            is_deleted=True,
            deleted_at=timezone.now()
        )

    def alive(self):
        return self.filter(is_deleted=False)

    def restore(self):
        """Annule la suppression logique de tout le QuerySet."""
        return self.update(is_deleted=False, deleted_at=None)

    def owned_by(self, user):
        """
        Objets créés par `user`. Les administrateurs voient tout.
        """
        if getattr(user, 'is_admin', False):
            return self
        return self.filter(created_by=user)

    def created_between(self, date_debut=None, date_fin=None):
        """Filtre sur la date de création (bornes incluses, dates sans heure)."""
        qs = self
        if date_debut:
            qs = qs.filter(created_at__date__gte=date_debut)
        if date_fin:
            qs = qs.filter(created_at__date__lte=date_fin)
        return qs


# ============================================================
# MANAGERS
# ============================================================

class SoftDeleteManager(models.Manager.from_queryset(OwnedQuerySet)):
    """
    Manager qui exclut automatiquement les objets supprimés.

    Usage dans un modèle :
        class Client(OwnedModel):
            objects     = SoftDeleteManager()   # Exclut supprimés
            all_objects = AllObjectsManager()   # Inclut tout (administration)
    """

    def get_queryset(self):
        return super().get_queryset().alive()


class AllObjectsManager(models.Manager.from_queryset(OwnedQuerySet)):
    """
    Manager sans filtre : objets supprimés compris.
    Utilisé par l'administration pour lister et restaurer.
    """
