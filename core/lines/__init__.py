"""
Modèle de tableau de lignes éditable, commun aux déclarations d'export
et aux livraisons.
"""

from .binder import DocumentBinder, SubmissionError, SubmissionInProgress
from .coercion import coerce_flag, coerce_price, coerce_quantity, coerce_text
from .editor import ExportLineEditor, LineCollectionEditor, export_editor, livraison_editor
from .items import CatalogEntry, ExportLine, LineDocument, LineItem, LivraisonLine, new_line_id

__all__ = [
    'CatalogEntry', 'DocumentBinder', 'ExportLine', 'ExportLineEditor',
    'LineCollectionEditor', 'LineDocument', 'LineItem', 'LivraisonLine',
    'SubmissionError', 'SubmissionInProgress',
    'coerce_flag', 'coerce_price', 'coerce_quantity', 'coerce_text',
    'export_editor', 'livraison_editor', 'new_line_id',
]
