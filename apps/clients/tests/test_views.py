"""
Tests des vues Clients et Modèles clients.
"""

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from apps.authentication.models import User
from apps.clients.models import Client, ClientModel
from core.constants import ROLE_LECTEUR


class ClientViewSetTest(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user   = User.objects.create_user(email='gest@example.com', password='SecurePass123!')
        self.other  = User.objects.create_user(email='autre@example.com', password='SecurePass123!')
        self.client.force_authenticate(user=self.user)

    def test_create_sets_owner(self):
        response = self.client.post(reverse('client-list'), {'name': 'ACME'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Client.objects.get().created_by, self.user)

    def test_list_only_own_clients(self):
        Client.objects.create(name='ACME', created_by=self.user)
        Client.objects.create(name='Autre', created_by=self.other)
        response = self.client.get(reverse('client-list'))
        self.assertEqual([c['name'] for c in response.data], ['ACME'])

    def test_search(self):
        Client.objects.create(name='ACME', created_by=self.user)
        Client.objects.create(name='Bolt', created_by=self.user)
        response = self.client.get(reverse('client-list'), {'search': 'acm'})
        self.assertEqual([c['name'] for c in response.data], ['ACME'])

    def test_catalog_is_deduplicated(self):
        acme = Client.objects.create(name='ACME', created_by=self.user)
        ClientModel.objects.create(client=acme, name='M-01', commandes='OPR1', created_by=self.user)
        ClientModel.objects.create(client=acme, name='M-01', commandes='OPR2', created_by=self.user)
        ClientModel.objects.create(client=acme, name='M-02', created_by=self.user)

        response = self.client.get(reverse('client-catalog', args=[acme.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(sorted(m['name'] for m in response.data), ['M-01', 'M-02'])

    def test_catalog_of_foreign_client_is_404(self):
        foreign = Client.objects.create(name='Autre', created_by=self.other)
        response = self.client.get(reverse('client-catalog', args=[foreign.id]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['code'], 'not_found')


class ClientModelViewSetTest(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user   = User.objects.create_user(email='gest@example.com', password='SecurePass123!')
        self.other  = User.objects.create_user(email='autre@example.com', password='SecurePass123!')
        self.acme   = Client.objects.create(name='ACME', created_by=self.user)
        self.url    = reverse('client-model-list')
        self.client.force_authenticate(user=self.user)

    def create_model(self, **extra):
        payload = {
            'name': 'M-01',
            'clientId': str(self.acme.id),
            'commandesWithVariants': [
                {'value': 'OPR1', 'variants': [{'name': 'defaut', 'qte_variante': '3'}]},
                {'value': '', 'variants': []},
            ],
            **extra,
        }
        return self.client.post(self.url, payload, format='json')

    def test_create(self):
        response = self.create_model(puht='12.5')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['commandes'], 'OPR1')
        self.assertEqual(response.data['client']['name'], 'ACME')
        self.assertEqual(response.data['puht'], '12.5000')
        self.assertEqual(
            [(v['name'], v['qte_variante']) for v in response.data['variants']],
            [('OPR1:defaut', 3)],
        )
        self.assertEqual(len(response.data['commandesWithVariants']), 1)

    def test_create_for_foreign_client_is_404(self):
        foreign = Client.objects.create(name='Autre', created_by=self.other)
        response = self.create_model(clientId=str(foreign.id))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_invalid_commande_code_is_422(self):
        response = self.create_model(commandesWithVariants=[{'value': 'OPR:1', 'variants': []}])
        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertEqual(response.data['code'], 'catalog_error')

    def test_missing_name_is_400(self):
        response = self.client.post(self.url, {'clientId': str(self.acme.id)}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('error', response.data)

    def test_update_with_id_in_body(self):
        model_id = self.create_model().data['id']
        response = self.client.put(self.url, {
            'id': model_id, 'name': 'M-01 bis', 'clientId': str(self.acme.id),
            'commandesWithVariants': [{'value': 'OPR7', 'variants': []}],
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['name'], 'M-01 bis')
        self.assertEqual(response.data['commandes'], 'OPR7')
        self.assertEqual(response.data['variants'], [])

    def test_update_on_detail_url(self):
        model_id = self.create_model().data['id']
        response = self.client.put(reverse('client-model-detail', args=[model_id]), {
            'name': 'M-02', 'clientId': str(self.acme.id),
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(ClientModel.objects.get(id=model_id).name, 'M-02')

    def test_delete_with_id_in_body(self):
        model_id = self.create_model().data['id']
        response = self.client.delete(self.url, {'id': model_id}, format='json')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(ClientModel.objects.filter(id=model_id).exists())

    def test_delete_without_id_is_400(self):
        response = self.client.delete(self.url, {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_foreign_model_is_404(self):
        foreign_client = Client.objects.create(name='Autre', created_by=self.other)
        foreign = ClientModel.objects.create(client=foreign_client, name='X', created_by=self.other)
        response = self.client.delete(self.url, {'id': str(foreign.id)}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertTrue(ClientModel.objects.filter(id=foreign.id).exists())

    def test_filters(self):
        self.create_model()
        self.create_model(name='M-02', commandesWithVariants=[{'value': 'OPR5', 'variants': []}])
        bolt = Client.objects.create(name='Bolt', created_by=self.user)
        self.create_model(name='M-03', clientId=str(bolt.id))

        by_search = self.client.get(self.url, {'search': 'opr5'})
        self.assertEqual([m['name'] for m in by_search.data], ['M-02'])

        by_client = self.client.get(self.url, {'client': str(bolt.id)})
        self.assertEqual([m['name'] for m in by_client.data], ['M-03'])

        future = self.client.get(self.url, {'dateDebut': '2999-01-01'})
        self.assertEqual(future.data, [])

    def test_lecteur_cannot_write(self):
        self.user.role = ROLE_LECTEUR
        self.user.save()
        response = self.create_model()
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self.client.get(self.url).status_code, status.HTTP_200_OK)
