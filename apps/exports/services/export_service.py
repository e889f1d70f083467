"""
Service des déclarations d'export.
"""

from core.lines import ExportLine as ExportLineItem
from core.lines import export_editor
from core.services import DocumentService

from ..models import DeclarationExport, ExportLine


class ExportService(DocumentService):

    model         = DeclarationExport
    line_model    = ExportLine
    line_class    = ExportLineItem
    parent_field  = 'declaration'
    header_fields = ('numero', 'date_export', 'lot', 'notes')
    kind          = 'export'

    @classmethod
    def save_declaration(cls, data: dict, user, instance: DeclarationExport = None) -> DeclarationExport:
        """
        Enregistre une déclaration et ses lignes (voir DocumentService.save).

        Exemple :
            ExportService.save_declaration({
                'client_id': client.id,
                'numero': 'EXP-00042',
                'lines': [{'modele': 'M-01', 'quantity': '3', 'unit_price': '2,5'}],
            }, user)
        """
        return cls.save(data, user, instance=instance)

    @staticmethod
    def totals(declaration: DeclarationExport) -> dict:
        """
        Montant de chaque ligne et total HT de la déclaration.
        Les lignes exclues ont un montant mais ne comptent pas dans le total.

        Returns:
            dict : {
                'lines': [{'id': ..., 'amount': Decimal, 'isExcluded': bool}, ...],
                'total': Decimal,
                'formatted': '7.50 €',
            }
        """
        document = declaration.to_line_document()
        total = export_editor.total(document)
        return {
            'lines': [
                {
                    'id':         line.id,
                    'amount':     export_editor.line_amount(line),
                    'isExcluded': line.is_excluded,
                }
                for line in document.lines
            ],
            'total':     total,
            'formatted': export_editor.format_amount(total),
        }
