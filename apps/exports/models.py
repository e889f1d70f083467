"""
Modèles de l'application Exports.

- DeclarationExport → déclaration d'export d'un client
- ExportLine        → ligne ordonnée de la déclaration (modèle, commande,
                      quantité, prix unitaire, exclusion du total)
"""

from django.db import models

from core.constants import (
    DEFAULT_LINE_UNIT_PRICE, MAX_NAME_LENGTH, MAX_REFERENCE_LENGTH,
    PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS,
)
from core.lines import ExportLine as ExportLineItem
from core.lines import LineDocument, export_editor
from core.models import DocumentLineModel, OwnedModel
from core.validators import validate_price


class DeclarationExport(OwnedModel):
    client = models.ForeignKey(
        'clients.Client',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='exports',
        verbose_name="Client"
    )
    # Conservé même si le client est supprimé
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
    date_export = models.DateField(
        null=True,
        blank=True,
        verbose_name="Date d'export"
    )
    lot = models.CharField(
        max_length=MAX_REFERENCE_LENGTH,
        blank=True,
        default='',
        verbose_name="Lot"
    )
    notes = models.TextField(
        blank=True,
        default='',
        verbose_name="Notes"
    )

    class Meta(OwnedModel.Meta):
        verbose_name        = "Déclaration d'export"
        verbose_name_plural = "Déclarations d'export"

    def __str__(self):
        return self.numero or f"Export {self.client_name}"

    def to_line_document(self) -> LineDocument:
        """Version immuable de la déclaration, manipulable par export_editor."""
        parent_id = str(self.id)
        return LineDocument(
            id=parent_id,
            client_name=self.client_name,
            lines=[line.to_line_item() for line in self.lines.all()],
            header={'numero': self.numero, 'dateExport': self.date_export, 'lot': self.lot},
        )

    @property
    def total(self):
        return export_editor.total(self.to_line_document())


class ExportLine(DocumentLineModel):
    declaration = models.ForeignKey(
        DeclarationExport,
        on_delete=models.CASCADE,
        related_name='lines',
        verbose_name="Déclaration"
    )
    unit_price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        default=DEFAULT_LINE_UNIT_PRICE,
        validators=[validate_price],
        verbose_name="Prix unitaire"
    )
    is_excluded = models.BooleanField(
        default=False,
        verbose_name="Exclue du total"
    )

    class Meta(DocumentLineModel.Meta):
        verbose_name        = "Ligne d'export"
        verbose_name_plural = "Lignes d'export"

    def __str__(self):
        return f"{self.modele or '-'} × {self.quantity}"

    @property
    def amount(self):
        return export_editor.line_amount(self)

    def to_line_item(self) -> ExportLineItem:
        return ExportLineItem(
            id=self.id.hex,
            commande=self.commande,
            modele=self.modele,
            description=self.description,
            quantity=self.quantity,
            unit_price=self.unit_price,
            is_excluded=self.is_excluded,
            parent_id=str(self.declaration_id),
        )
