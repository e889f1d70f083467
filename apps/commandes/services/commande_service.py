"""
Service de gestion des commandes.
"""

import logging

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Q

from core.constants import MAX_COMMANDE_NAME_LENGTH
from core.exceptions import ConflictError, ValidationError
from core.validators import validate_commande_name

from ..models import Commande

logger = logging.getLogger('gestexport')


class CommandeService:

    @staticmethod
    def max_length() -> int:
        return getattr(settings, 'GESTEXPORT_COMMANDE_MAX_LENGTH', MAX_COMMANDE_NAME_LENGTH)

    @staticmethod
    def create(name, user) -> Commande:
        """
        Crée une commande pour l'utilisateur.

        Le nom est débarrassé de ses espaces ; vide ou trop long → 400,
        déjà existant chez cet utilisateur → 409.
        """
        name = (name or '').strip()
        try:
            validate_commande_name(name)
        except DjangoValidationError as exc:
            raise ValidationError(exc.messages[0])

        limit = CommandeService.max_length()
        if len(name) > limit:
            raise ValidationError(f"Le nom de la commande ne peut pas dépasser {limit} caractères.")

        if Commande.objects.filter(created_by=user, name__iexact=name).exists():
            raise ConflictError(f"La commande '{name}' existe déjà.")

        commande = Commande.objects.create(name=name, created_by=user)
        logger.info(f"Commande créée : {commande.name} par {user.email}")
        return commande

    @staticmethod
    def search(queryset, term):
        """Filtre sur le nom ou l'identifiant, insensible à la casse."""
        term = (term or '').strip()
        if not term:
            return queryset
        return queryset.filter(Q(name__icontains=term) | Q(id__icontains=term))
