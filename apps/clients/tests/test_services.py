"""
Tests du service des modèles clients.
"""

from decimal import Decimal

from django.test import TestCase

from apps.authentication.models import User
from apps.clients.models import Client, ClientModel
from apps.clients.services.client_model_service import ClientModelService
from core.exceptions import CatalogError, NotFoundError
from core.signals import catalog_changed


class CombineCommandesTest(TestCase):

    def test_blank_commandes_are_dropped(self):
        commandes, kept, variants = ClientModelService.combine_commandes([
            {'value': 'OPR1', 'variants': [{'name': 'defaut', 'qte_variante': 3}]},
            {'value': '  ',   'variants': [{'name': 'perdue', 'qte_variante': 1}]},
            {'value': 'OPR2', 'variants': [{'name': '', 'qte_variante': 1}]},
        ])
        self.assertEqual(commandes, 'OPR1,OPR2')
        self.assertEqual([entry['value'] for entry in kept], ['OPR1', 'OPR2'])
        self.assertEqual(variants, [('OPR1:defaut', 3)])

    def test_quantities_are_coerced(self):
        _, kept, variants = ClientModelService.combine_commandes([
            {'value': 'OPR1', 'variants': [{'name': 'a', 'qte_variante': ''}, {'name': 'b', 'qte_variante': '4'}]},
        ])
        self.assertEqual(variants, [('OPR1:a', 0), ('OPR1:b', 4)])
        self.assertEqual(kept[0]['variants'][1], {'name': 'b', 'qte_variante': 4})

    def test_empty_input(self):
        self.assertEqual(ClientModelService.combine_commandes(None), ('', [], []))

    def test_separator_in_code_is_refused(self):
        with self.assertRaises(CatalogError):
            ClientModelService.combine_commandes([{'value': 'OPR:1', 'variants': []}])


class SaveModelTest(TestCase):

    def setUp(self):
        self.user  = User.objects.create_user(email='gest@example.com', password='SecurePass123!')
        self.other = User.objects.create_user(email='autre@example.com', password='SecurePass123!')
        self.acme  = Client.objects.create(name='ACME', created_by=self.user)

    def save(self, **data):
        return ClientModelService.save_model({'client_id': self.acme.id, 'name': 'M-01', **data}, self.user)

    def test_create_with_variants(self):
        model = self.save(commandes_with_variants=[
            {'value': 'OPR1', 'variants': [{'name': 'defaut', 'qte_variante': 3}]},
            {'value': 'OPR2', 'variants': []},
        ], puht='12,5')

        self.assertEqual(model.commandes, 'OPR1,OPR2')
        self.assertEqual(model.puht, Decimal('12.5'))
        self.assertEqual(model.created_by, self.user)
        self.assertEqual([(v.name, v.qte_variante) for v in model.variants.all()], [('OPR1:defaut', 3)])

    def test_update_recreates_variants(self):
        model = self.save(commandes_with_variants=[
            {'value': 'OPR1', 'variants': [{'name': 'defaut', 'qte_variante': 3}]},
        ])
        ClientModelService.save_model({'commandes_with_variants': [
            {'value': 'OPR9', 'variants': [{'name': 'x', 'qte_variante': 1}]},
        ]}, self.user, instance=model)

        model.refresh_from_db()
        self.assertEqual(model.commandes, 'OPR9')
        self.assertEqual([v.name for v in model.variants.all()], ['OPR9:x'])
        self.assertEqual(model.updated_by, self.user)

    def test_plain_commandes_are_normalised(self):
        model = self.save(commandes=' OPR1 , ,OPR2')
        self.assertEqual(model.commandes, 'OPR1,OPR2')
        self.assertEqual(model.commande_list, ['OPR1', 'OPR2'])

    def test_blank_name_is_refused(self):
        with self.assertRaises(CatalogError):
            self.save(name='   ')

    def test_foreign_client_is_not_found(self):
        foreign = Client.objects.create(name='Autre', created_by=self.other)
        with self.assertRaises(NotFoundError):
            ClientModelService.save_model({'client_id': foreign.id, 'name': 'M-01'}, self.user)

    def test_catalog_changed_is_sent(self):
        received = []

        def on_change(sender, **kwargs):
            received.append(kwargs)

        catalog_changed.connect(on_change)
        self.addCleanup(catalog_changed.disconnect, on_change)

        model = self.save()
        ClientModelService.delete_model(model, self.user)

        self.assertEqual([event['action'] for event in received], ['saved', 'deleted'])
        self.assertEqual(received[0]['client_id'], self.acme.id)

    def test_delete_is_soft(self):
        model = self.save()
        ClientModelService.delete_model(model, self.user)
        self.assertFalse(ClientModel.objects.filter(id=model.id).exists())
        self.assertTrue(ClientModel.all_objects.filter(id=model.id).exists())


class CatalogTest(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(email='gest@example.com', password='SecurePass123!')
        self.acme = Client.objects.create(name='ACME', created_by=self.user)

    def test_deduplicate_keeps_last_by_name(self):
        models = [
            {'client_id': 'c1', 'name': 'M-01', 'commandes': 'A'},
            {'client_id': 'c1', 'name': 'M-02', 'commandes': 'B'},
            {'client_id': 'c1', 'name': 'M-01', 'commandes': 'C'},
            {'client_id': 'c2', 'name': 'M-01', 'commandes': 'D'},
        ]
        unique = ClientModelService.deduplicate(models)
        self.assertEqual([m['commandes'] for m in unique], ['C', 'B', 'D'])

    def test_catalog_for_client(self):
        ClientModel.objects.create(client=self.acme, name='M-01', commandes='OPR1',
                                   description='Chemise', created_by=self.user)
        other = Client.objects.create(name='Autre', created_by=self.user)
        ClientModel.objects.create(client=other, name='M-09', created_by=self.user)

        catalog = ClientModelService.catalog_for_client(self.acme)

        self.assertEqual(len(catalog), 1)
        self.assertEqual(catalog[0].name, 'M-01')
        self.assertEqual(catalog[0].commandes, 'OPR1')
        self.assertEqual(catalog[0].client_id, str(self.acme.id))
