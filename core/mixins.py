"""
Mixins réutilisables du projet GestExport.

Un Mixin apporte une fonctionnalité précise sans être un modèle complet.
On les combine par héritage multiple.

Modèles :
- TimestampMixin  → created_at, updated_at
- SoftDeleteMixin → is_deleted, deleted_at + delete() logique
- OwnerMixin      → created_by, updated_by

Vues (DRF) :
- OwnedQuerysetMixin → limite le queryset aux objets de l'utilisateur
- AuditMixin         → renseigne created_by / updated_by
"""

from django.conf import settings
from django.db import models
from django.utils import timezone

from .managers import AllObjectsManager, SoftDeleteManager


# ============================================================
# MIXIN TIMESTAMPS
# ============================================================

class TimestampMixin(models.Model):
    """
    Ajoute created_at et updated_at automatiquement.

    created_at : rempli UNE SEULE FOIS à la création (auto_now_add)
    updated_at : mis à jour À CHAQUE save() (auto_now)

    created_at sert aussi aux filtres dateDebut / dateFin des listes.
    """
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name="Créé le",
        db_index=True
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name="Modifié le"
    )

    class Meta:
        abstract = True


# ============================================================
# MIXIN SOFT DELETE
# ============================================================

class SoftDeleteMixin(models.Model):
    """
    Ajoute la suppression logique (soft delete).

    Une déclaration d'export ou une livraison supprimée reste en base
    (traçabilité douanière) mais disparaît des listes.

    Usage :
        livraison.delete()                          # Soft delete → is_deleted=True
        Livraison.all_objects.filter(...).restore() # Restauration (administration)
    """
    is_deleted = models.BooleanField(
        default=False,
        verbose_name="Supprimé",
        db_index=True
    )
    deleted_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name="Supprimé le"
    )

    objects     = SoftDeleteManager()
    all_objects = AllObjectsManager()

    def delete(self, using=None, keep_parents=False):
        """Suppression logique au lieu de physique."""
        self.is_deleted = True
        self.deleted_at = timezone.now()
        self.save(update_fields=['is_deleted', 'deleted_at'])

    class Meta:
        abstract = True


# ============================================================
# MIXIN PROPRIÉTAIRE
# ============================================================

class OwnerMixin(models.Model):
    """
    Traçabilité du créateur et du modificateur.

    created_by sert aussi de cloisonnement : chaque utilisateur ne voit
    que ses clients, modèles, commandes et documents.
    """
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='%(class)s_created',
        verbose_name="Créé par"
    )
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='%(class)s_updated',
        verbose_name="Modifié par"
    )

    class Meta:
        abstract = True


# ============================================================
# MIXINS POUR LES VUES API (ViewSet)
# ============================================================

class OwnedQuerysetMixin:
    """
    Limite le queryset d'un ViewSet aux objets de l'utilisateur connecté.

    Usage :
        class ClientViewSet(OwnedQuerysetMixin, viewsets.ModelViewSet):
            queryset = Client.objects.all()
    """

    def get_queryset(self):
        return super().get_queryset().owned_by(self.request.user)


class AuditMixin:
    """
    Enregistre automatiquement created_by et updated_by.

    Usage :
        class ClientViewSet(AuditMixin, viewsets.ModelViewSet):
            queryset = Client.objects.all()
            serializer_class = ClientSerializer
    """

    def perform_create(self, serializer):
        serializer.save(created_by=self.request.user)

    def perform_update(self, serializer):
        serializer.save(updated_by=self.request.user)
