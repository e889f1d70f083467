"""
Enregistrement des documents à lignes (déclarations d'export, livraisons).

Un document est toujours enregistré EN ENTIER : en-tête + tableau de
lignes. Les lignes existantes sont remplacées par celles reçues, dans
l'ordre reçu (position 0, 1, 2...). Une ligne absente du tableau est
supprimée.

Chaque sous-classe déclare :
- model          : modèle parent (DeclarationExport, Livraison)
- line_model     : modèle des lignes
- line_class     : structure immuable correspondante (core.lines)
- parent_field   : nom de la FK ligne → parent
- header_fields  : champs d'en-tête recopiés tels quels
- kind           : 'export' | 'livraison' (transmis au signal document_saved)
"""

import logging
import uuid
from decimal import Decimal, ROUND_HALF_UP

from django.apps import apps
from django.db import models, transaction

from .constants import PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS
from .exceptions import DocumentLinesError, NotFoundError
from .lines import LineItem, coerce_text
from .signals import document_saved

logger = logging.getLogger('gestexport')

# Limite d'un PositiveIntegerField
MAX_QUANTITY = 2147483647
MAX_UNIT_PRICE = Decimal(10) ** (PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES)
PRICE_STEP = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)


class DocumentService:

    model         = None
    line_model    = None
    line_class    = LineItem
    parent_field  = None
    header_fields = ()
    kind          = None

    # --------------------------------------------------------
    # CLIENT
    # --------------------------------------------------------

    @staticmethod
    def get_client(client_id, user):
        """Client appartenant à l'utilisateur, NotFoundError sinon."""
        client_model = apps.get_model('clients', 'Client')
        client = client_model.objects.owned_by(user).filter(id=client_id).first()
        if client is None:
            raise NotFoundError(f"Client {client_id} introuvable.")
        return client

    # --------------------------------------------------------
    # ENREGISTREMENT
    # --------------------------------------------------------

    @classmethod
    def save(cls, data: dict, user, instance=None):
        """
        Crée ou met à jour un document et remplace ses lignes.

        Args:
            data     : champs validés (client_id, client_name, en-tête, lines)
            user     : utilisateur courant (propriétaire à la création)
            instance : document existant ou None

        Raises:
            NotFoundError      : client inconnu pour cet utilisateur
            DocumentLinesError : valeur de ligne hors des limites stockables
        """
        with transaction.atomic():
            creating = instance is None
            document = instance or cls.model(created_by=user)

            if 'client_id' in data:
                client_id = data['client_id']
                document.client = cls.get_client(client_id, user) if client_id else None

            if data.get('client_name'):
                document.client_name = coerce_text(data['client_name']).strip()
            elif creating or 'client_name' in data:
                document.client_name = document.client.name if document.client else ''

            for field in cls.header_fields:
                if field in data:
                    setattr(document, field, data[field] if data[field] is not None else
                            cls.model._meta.get_field(field).get_default())

            cls.check_lengths(cls.model, document, ('client_name', *cls.header_fields))

            if not creating:
                document.updated_by = user
            document.save()

            if data.get('lines') is not None:
                count = cls.replace_lines(document, data['lines'])
            else:
                count = document.lines.count()

        logger.info(
            f"{cls.kind} {'créé' if creating else 'modifié'} : {document.pk} "
            f"({count} ligne(s)) par {user.email}"
        )
        document_saved.send(sender=cls.model, document=document, kind=cls.kind, created=creating)
        return document

    @classmethod
    def replace_lines(cls, document, lines) -> int:
        """Remplace toutes les lignes du document, dans l'ordre reçu."""
        existing_ids = set(document.lines.values_list('id', flat=True))
        rows = [
            cls.line_model(
                id=cls._line_id(raw.get('id'), existing_ids),
                position=position,
                **{cls.parent_field: document},
                **cls.line_values(raw, position),
            )
            for position, raw in enumerate(lines)
        ]
        # Un même identifiant envoyé deux fois : la seconde ligne en reçoit un nouveau
        seen = set()
        for row in rows:
            if row.id in seen:
                row.id = uuid.uuid4()
            seen.add(row.id)

        document.lines.all().delete()
        cls.line_model.objects.bulk_create(rows)
        return len(rows)

    @classmethod
    def line_values(cls, raw, position) -> dict:
        """Valeurs stockables d'une ligne, converties de façon tolérante."""
        values = {}
        for name, coerce in cls.line_class.COERCERS.items():
            if name in raw:
                values[name] = coerce(raw[name])

        for name, value in values.items():
            max_length = cls._max_length(cls.line_model, name)
            if max_length and isinstance(value, str) and len(value) > max_length:
                raise DocumentLinesError(
                    f"Ligne {position + 1} : {name} trop long ({max_length} caractères max)."
                )

        if values.get('quantity', 0) > MAX_QUANTITY:
            raise DocumentLinesError(f"Ligne {position + 1} : quantité trop élevée.")

        if 'unit_price' in values:
            price = values['unit_price']
            if price < MAX_UNIT_PRICE:
                price = price.quantize(PRICE_STEP, rounding=ROUND_HALF_UP)
            if price >= MAX_UNIT_PRICE:
                raise DocumentLinesError(f"Ligne {position + 1} : prix unitaire trop élevé.")
            values['unit_price'] = price

        return values

    @classmethod
    def check_lengths(cls, model, instance, fields) -> None:
        """Refuse une valeur d'en-tête plus longue que sa colonne."""
        for name in fields:
            max_length = cls._max_length(model, name)
            value = getattr(instance, name)
            if max_length and isinstance(value, str) and len(value) > max_length:
                raise DocumentLinesError(f"{name} trop long ({max_length} caractères max).")

    @staticmethod
    def _max_length(model, name):
        """Longueur maximale d'une colonne CharField, None pour les autres champs."""
        field = model._meta.get_field(name)
        return field.max_length if isinstance(field, models.CharField) else None

    @staticmethod
    def _line_id(raw_id, existing_ids):
        """L'identifiant envoyé n'est conservé que s'il désigne déjà une ligne du document."""
        if raw_id:
            try:
                line_id = uuid.UUID(str(raw_id))
            except ValueError:
                line_id = None
            if line_id in existing_ids:
                return line_id
        return uuid.uuid4()

    # --------------------------------------------------------
    # SUPPRESSION
    # --------------------------------------------------------

    @classmethod
    def delete(cls, document, user) -> None:
        """Suppression logique ; les lignes restent attachées au document."""
        document.updated_by = user
        document.save(update_fields=['updated_by'])
        document.delete()
        logger.info(f"{cls.kind} supprimé : {document.pk} par {user.email}")
