"""
Service des modèles clients (catalogue).

Règles d'enregistrement d'un modèle :
- `commandes` = valeurs non vides de commandes_with_variants, jointes par ','
- une Variant par variante nommée, nom "COMMANDE:variante"
- les variantes sans nom sont ignorées
- les commandes sans valeur sont retirées de commandes_with_variants
"""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction

from core.constants import COMMANDES_SEPARATOR, VARIANT_SEPARATOR
from core.exceptions import CatalogError, NotFoundError
from core.lines import CatalogEntry, coerce_price, coerce_quantity, coerce_text
from core.signals import catalog_changed
from core.utils import split_commandes
from core.validators import validate_commande_code

from ..models import Client, ClientModel, Variant

logger = logging.getLogger('gestexport')


class ClientModelService:

    # --------------------------------------------------------
    # CLIENTS
    # --------------------------------------------------------

    @staticmethod
    def get_client(client_id, user) -> Client:
        """Client de l'utilisateur ; NotFoundError sinon (même s'il existe ailleurs)."""
        client = Client.objects.owned_by(user).filter(id=client_id).first() if client_id else None
        if client is None:
            raise NotFoundError(f"Client {client_id} introuvable.")
        return client

    # --------------------------------------------------------
    # COMMANDES ET VARIANTES
    # --------------------------------------------------------

    @staticmethod
    def combine_commandes(commandes_with_variants) -> tuple:
        """
        Normalise la saisie structurée des commandes.

        Returns:
            tuple : (commandes jointes, entrées conservées, [(nom, qte), ...])

        Exemple :
            combine_commandes([
                {'value': 'OPR1', 'variants': [{'name': 'defaut', 'qte_variante': 3}]},
                {'value': '  ',   'variants': []},
                {'value': 'OPR2', 'variants': [{'name': '', 'qte_variante': 1}]},
            ])
            # → ('OPR1,OPR2', [...2 entrées...], [('OPR1:defaut', 3)])
        """
        kept, variants = [], []

        for entry in commandes_with_variants or []:
            value = coerce_text(entry.get('value')).strip()
            if not value:
                continue
            try:
                validate_commande_code(value)
            except DjangoValidationError as exc:
                raise CatalogError(exc.messages[0])

            entry_variants = []
            for raw in entry.get('variants') or []:
                name = coerce_text(raw.get('name')).strip()
                qte  = coerce_quantity(raw.get('qte_variante'))
                entry_variants.append({'name': name, 'qte_variante': qte})
                if name:
                    variants.append((f"{value}{VARIANT_SEPARATOR}{name}", qte))

            kept.append({'value': value, 'variants': entry_variants})

        commandes = COMMANDES_SEPARATOR.join(entry['value'] for entry in kept)
        return commandes, kept, variants

    # --------------------------------------------------------
    # ENREGISTREMENT
    # --------------------------------------------------------

    @staticmethod
    @transaction.atomic
    def save_model(data: dict, user, instance: ClientModel = None) -> ClientModel:
        """
        Crée ou met à jour un modèle client et recrée ses variantes.

        Args:
            data     : champs validés (name, description, client_id,
                       commandes_with_variants, commandes, lotto, ordine, puht)
            user     : propriétaire
            instance : modèle existant (mise à jour) ou None (création)
        """
        creating = instance is None
        model = instance or ClientModel(created_by=user)

        if 'client_id' in data or creating:
            model.client = ClientModelService.get_client(data.get('client_id'), user)

        for field in ('name', 'description', 'lotto', 'ordine'):
            if field in data:
                setattr(model, field, coerce_text(data[field]).strip())

        if not model.name:
            raise CatalogError("Le nom du modèle est obligatoire.")

        if 'puht' in data:
            model.puht = coerce_price(data['puht']) if data['puht'] not in (None, '') else None

        variants = None
        if data.get('commandes_with_variants') is not None:
            model.commandes, model.commandes_with_variants, variants = (
                ClientModelService.combine_commandes(data['commandes_with_variants'])
            )
        elif 'commandes' in data:
            model.commandes = COMMANDES_SEPARATOR.join(split_commandes(coerce_text(data['commandes'])))

        if not creating:
            model.updated_by = user
        model.save()

        if variants is not None:
            model.variants.all().delete()
            Variant.objects.bulk_create([
                Variant(client_model=model, name=name, qte_variante=qte)
                for name, qte in variants
            ])

        logger.info(
            f"Modèle client {'créé' if creating else 'modifié'} : {model.name} "
            f"(client={model.client_id}, {len(variants or [])} variante(s))"
        )
        catalog_changed.send(
            sender=ClientModel, client_id=model.client_id, model_id=model.id, action='saved',
        )
        return model

    @staticmethod
    def delete_model(model: ClientModel, user) -> None:
        """Suppression logique ; le modèle disparaît du catalogue du client."""
        model.updated_by = user
        model.save(update_fields=['updated_by'])
        model.delete()
        catalog_changed.send(
            sender=ClientModel, client_id=model.client_id, model_id=model.id, action='deleted',
        )

    # --------------------------------------------------------
    # CATALOGUE
    # --------------------------------------------------------

    @staticmethod
    def deduplicate(models) -> list:
        """
        Un seul modèle par couple (client, nom).

        Le dernier rencontré l'emporte ; l'ordre est celui de la première
        apparition de chaque couple.
        """
        unique = {}
        for model in models:
            entry = CatalogEntry.from_source(model)
            unique[(entry.client_id, entry.name)] = model
        return list(unique.values())

    @staticmethod
    def catalog_for_client(client: Client) -> list:
        """Catalogue prêt pour ExportLineEditor.bind_model()."""
        models = ClientModel.objects.filter(client=client).order_by('created_at')
        return [
            CatalogEntry.from_source(model)
            for model in ClientModelService.deduplicate(models)
        ]
