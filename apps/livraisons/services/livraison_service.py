"""
Service des livraisons.
"""

from core.lines import LivraisonLine as LivraisonLineItem
from core.services import DocumentService

from ..models import Livraison, LivraisonLine


class LivraisonService(DocumentService):

    model         = Livraison
    line_model    = LivraisonLine
    line_class    = LivraisonLineItem
    parent_field  = 'livraison'
    header_fields = ('numero', 'date_livraison', 'adresse', 'notes')
    kind          = 'livraison'

    @classmethod
    def save_livraison(cls, data: dict, user, instance: Livraison = None) -> Livraison:
        """Enregistre une livraison et ses lignes (voir DocumentService.save)."""
        return cls.save(data, user, instance=instance)
