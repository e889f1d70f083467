"""
Modèle de l'application Commandes.

Une commande est un simple code de référence (ex: "OPR3328") saisi
par l'utilisateur puis repris dans les modèles clients et les lignes.
"""

from django.db import models

from core.constants import MAX_COMMANDE_NAME_LENGTH
from core.models import OwnedModel
from core.validators import validate_commande_name


class Commande(OwnedModel):
    name = models.CharField(
        max_length=MAX_COMMANDE_NAME_LENGTH,
        validators=[validate_commande_name],
        verbose_name="Nom"
    )

    class Meta(OwnedModel.Meta):
        verbose_name        = "Commande"
        verbose_name_plural = "Commandes"

    def __str__(self):
        return self.name
