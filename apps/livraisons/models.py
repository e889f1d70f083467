"""
Modèles de l'application Livraisons.

- Livraison      → bon de livraison d'un client
- LivraisonLine  → ligne ordonnée (modèle, commande, description, quantité)
"""

from django.db import models

from core.constants import MAX_NAME_LENGTH, MAX_REFERENCE_LENGTH
from core.lines import LineDocument, LivraisonLine as LivraisonLineItem, livraison_editor
from core.models import DocumentLineModel, OwnedModel


class Livraison(OwnedModel):
    client = models.ForeignKey(
        'clients.Client',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='livraisons',
        verbose_name="Client"
    )
    client_name = models.CharField(
        max_length=MAX_NAME_LENGTH,
        blank=True,
        default='',
        verbose_name="Nom du client"
    )
    numero = models.CharField(
        max_length=MAX_REFERENCE_LENGTH,
        blank=True,
        default='',
        verbose_name="Numéro"
    )
    date_livraison = models.DateField(
        null=True,
        blank=True,
        verbose_name="Date de livraison"
    )
    adresse = models.TextField(
        blank=True,
        default='',
        verbose_name="Adresse de livraison"
    )
    notes = models.TextField(
        blank=True,
        default='',
        verbose_name="Notes"
    )

    class Meta(OwnedModel.Meta):
        verbose_name        = "Livraison"
        verbose_name_plural = "Livraisons"

    def __str__(self):
        return self.numero or f"Livraison {self.client_name}"

    def to_line_document(self) -> LineDocument:
        return LineDocument(
            id=str(self.id),
            client_name=self.client_name,
            lines=[line.to_line_item() for line in self.lines.all()],
            header={'numero': self.numero, 'dateLivraison': self.date_livraison},
        )

    @property
    def total_quantity(self):
        return livraison_editor.total_quantity(self.to_line_document())


class LivraisonLine(DocumentLineModel):
    livraison = models.ForeignKey(
        Livraison,
        on_delete=models.CASCADE,
        related_name='lines',
        verbose_name="Livraison"
    )

    class Meta(DocumentLineModel.Meta):
        verbose_name        = "Ligne de livraison"
        verbose_name_plural = "Lignes de livraison"

    def __str__(self):
        return f"{self.modele or '-'} × {self.quantity}"

    def to_line_item(self) -> LivraisonLineItem:
        return LivraisonLineItem(
            id=self.id.hex,
            commande=self.commande,
            modele=self.modele,
            description=self.description,
            quantity=self.quantity,
            parent_id=str(self.livraison_id),
        )
