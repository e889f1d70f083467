"""
Signaux applicatifs du projet GestExport.

Remplacent tout crochet global de rafraîchissement : une vue (ou un
service) qui dépend des données d'une autre s'abonne explicitement.

Signaux :
- document_saved   : un document (export, livraison) vient d'être enregistré
                     kwargs : document, kind ('export' | 'livraison'), created
- catalog_changed  : le catalogue de modèles d'un client a changé
                     kwargs : client_id, model_id, action ('saved' | 'deleted')

Usage :
    from django.dispatch import receiver
    from core.signals import catalog_changed

    @receiver(catalog_changed)
    def on_catalog_changed(sender, client_id, **kwargs):
        ...
"""

from django.dispatch import Signal

document_saved  = Signal()
catalog_changed = Signal()
