"""
Modèles de l'application Clients.

- Client       → client destinataire des exports et livraisons
- ClientModel  → modèle (article) d'un client, avec ses commandes
- Variant      → variante d'un modèle pour une commande ("OPR3328:defaut")

Le catalogue d'un client (ses ClientModel) alimente le choix du
modèle dans les lignes d'export : sélectionner un modèle recopie ses
commandes et sa description dans la ligne.
"""

from django.db import models

from core.constants import (
    MAX_CODE_LENGTH, MAX_NAME_LENGTH, PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS,
    VARIANT_SEPARATOR,
)
from core.models import BaseModel, NamedModel
from core.utils import split_commandes
from core.validators import validate_non_negative


# ============================================================
# CLIENT
# ============================================================

class Client(NamedModel):
    email = models.EmailField(
        blank=True,
        default='',
        verbose_name="Email"
    )
    phone = models.CharField(
        max_length=30,
        blank=True,
        default='',
        verbose_name="Téléphone"
    )
    address = models.TextField(
        blank=True,
        default='',
        verbose_name="Adresse"
    )

    class Meta(NamedModel.Meta):
        verbose_name        = "Client"
        verbose_name_plural = "Clients"
        ordering            = ['name']


# ============================================================
# MODÈLE CLIENT
# ============================================================

class ClientModel(NamedModel):
    """
    Modèle d'un client.

    `commandes` est la liste des commandes jointes par des virgules
    ("OPR1,OPR2") : c'est la valeur recopiée dans une ligne d'export.
    `commandes_with_variants` conserve la saisie structurée :
        [{"value": "OPR1", "variants": [{"name": "defaut", "qte_variante": 3}]}]
    """
    client = models.ForeignKey(
        Client,
        on_delete=models.CASCADE,
        related_name='client_models',
        verbose_name="Client"
    )
    commandes = models.TextField(
        blank=True,
        default='',
        verbose_name="Commandes"
    )
    commandes_with_variants = models.JSONField(
        default=list,
        blank=True,
        verbose_name="Commandes et variantes"
    )
    lotto = models.CharField(
        max_length=MAX_CODE_LENGTH,
        blank=True,
        default='',
        verbose_name="Lot"
    )
    ordine = models.CharField(
        max_length=MAX_CODE_LENGTH,
        blank=True,
        default='',
        verbose_name="Ordre"
    )
    puht = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        null=True,
        blank=True,
        validators=[validate_non_negative],
        verbose_name="Prix unitaire HT"
    )

    class Meta(NamedModel.Meta):
        verbose_name        = "Modèle client"
        verbose_name_plural = "Modèles clients"

    def __str__(self):
        return f"{self.name} ({self.client.name})"

    @property
    def commande_list(self):
        return split_commandes(self.commandes)


# ============================================================
# VARIANTE
# ============================================================

class Variant(BaseModel):
    """
    Variante d'un modèle, nommée "COMMANDE:variante".
    Recréées à chaque enregistrement du modèle.
    """
    client_model = models.ForeignKey(
        ClientModel,
        on_delete=models.CASCADE,
        related_name='variants',
        verbose_name="Modèle client"
    )
    name = models.CharField(
        max_length=MAX_NAME_LENGTH,
        verbose_name="Nom"
    )
    qte_variante = models.PositiveIntegerField(
        default=0,
        verbose_name="Quantité"
    )

    class Meta(BaseModel.Meta):
        verbose_name        = "Variante"
        verbose_name_plural = "Variantes"
        ordering            = ['created_at', 'name']

    def __str__(self):
        return self.name

    @property
    def commande(self):
        return self.name.split(VARIANT_SEPARATOR, 1)[0] if VARIANT_SEPARATOR in self.name else ''

    @property
    def variant_name(self):
        return self.name.split(VARIANT_SEPARATOR, 1)[-1]
