"""
Modèles abstraits de base du projet GestExport.

Ces modèles ne créent AUCUNE table (class Meta: abstract = True).

Hiérarchie d'héritage :
    BaseModel                 → id UUID + timestamps
    ├── OwnedModel            → + soft delete + created_by/updated_by
    │   └── NamedModel        → + name + description
    └── DocumentLineModel     → ligne ordonnée d'un document (position,
                                commande, modèle, description, quantité)
"""

import uuid
from django.db import models

from .mixins import TimestampMixin, SoftDeleteMixin, OwnerMixin
from .constants import (
    MAX_NAME_LENGTH, MAX_DESCRIPTION_LENGTH,
    DEFAULT_LINE_QUANTITY,
)


# ============================================================
# MODÈLE 1 : BASE MODEL
# ============================================================

class BaseModel(TimestampMixin):
    """
    Modèle de base minimal pour tous les modèles du projet.

    Fournit :
    - id          : UUID unique
    - created_at  : Date/heure de création (automatique)
    - updated_at  : Date/heure de dernière modification (automatique)

    Les identifiants de lignes générés côté client (uuid4 hex) sont
    directement réutilisables comme clés primaires.
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        verbose_name="Identifiant"
    )

    class Meta:
        abstract = True
        ordering = ['-created_at']


# ============================================================
# MODÈLE 2 : OWNED MODEL
# ============================================================

class OwnedModel(BaseModel, SoftDeleteMixin, OwnerMixin):
    """
    Entité métier appartenant à un utilisateur, supprimable logiquement.

    Usage :
        class Livraison(OwnedModel):
            numero = models.CharField(max_length=50)

        Livraison.objects.owned_by(request.user)
    """

    class Meta(BaseModel.Meta):
        abstract = True


# ============================================================
# MODÈLE 3 : NAMED MODEL
# ============================================================

class NamedModel(OwnedModel):
    name = models.CharField(
        max_length=MAX_NAME_LENGTH,
        verbose_name="Nom"
    )
    description = models.TextField(
        blank=True,
        default='',
        max_length=MAX_DESCRIPTION_LENGTH,
        verbose_name="Description"
    )

    def __str__(self):
        return self.name

    class Meta(OwnedModel.Meta):
        abstract = True


# ============================================================
# MODÈLE 4 : LIGNE DE DOCUMENT
# ============================================================

class DocumentLineModel(BaseModel):
    """
    Ligne ordonnée d'un document (export ou livraison).

    `position` reflète l'ordre du tableau envoyé par le client ;
    il est réécrit à chaque enregistrement du document. Les lignes
    n'ont pas de soft delete : elles vivent et meurent avec leur document.
    """
    position = models.PositiveIntegerField(
        default=0,
        db_index=True,
        verbose_name="Position"
    )
    commande = models.CharField(
        max_length=MAX_NAME_LENGTH,
        blank=True,
        default='',
        verbose_name="Commande"
    )
    modele = models.CharField(
        max_length=MAX_NAME_LENGTH,
        blank=True,
        default='',
        verbose_name="Modèle"
    )
    description = models.TextField(
        blank=True,
        default='',
        verbose_name="Description"
    )
    quantity = models.PositiveIntegerField(
        default=DEFAULT_LINE_QUANTITY,
        verbose_name="Quantité"
    )

    class Meta(BaseModel.Meta):
        abstract = True
        ordering = ['position']
