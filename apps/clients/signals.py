"""
Récepteurs de signaux de l'application Clients.

catalog_changed est émis par ClientModelService à chaque enregistrement
ou suppression d'un modèle client.
"""

import logging

from django.dispatch import receiver

from core.signals import catalog_changed

logger = logging.getLogger('gestexport')


@receiver(catalog_changed)
def log_catalog_change(sender, client_id=None, model_id=None, action=None, **kwargs):
    logger.info(f"Catalogue du client {client_id} modifié : modèle {model_id} {action}")
