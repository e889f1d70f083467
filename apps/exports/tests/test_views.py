"""
Tests des vues Exports : les lignes sont envoyées et renvoyées avec
le document, dans l'ordre.
"""

from datetime import timedelta

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from apps.authentication.models import User
from apps.clients.models import Client
from apps.exports.models import DeclarationExport
from core.constants import ROLE_ADMIN, ROLE_LECTEUR


class DeclarationExportViewSetTest(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user   = User.objects.create_user(email='gest@example.com', password='SecurePass123!')
        self.other  = User.objects.create_user(email='autre@example.com', password='SecurePass123!')
        self.acme   = Client.objects.create(name='ACME', created_by=self.user)
        self.url    = reverse('export-list')
        self.client.force_authenticate(user=self.user)

    def create_export(self, lines=None, **extra):
        payload = {'clientId': str(self.acme.id), 'numero': 'EXP-00001', 'lines': lines or [], **extra}
        return self.client.post(self.url, payload, format='json')

    def detail_url(self, export_id):
        return reverse('export-detail', args=[export_id])

    def test_create_with_lenient_lines(self):
        response = self.create_export([
            {'modele': 'M-01', 'quantity': '3', 'unitPrice': '2,5'},
            {'modele': 'M-02', 'quantity': '', 'unitPrice': 'abc', 'isExcluded': True},
        ], dateExport='2024-03-01')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = response.data
        self.assertEqual(data['clientName'], 'ACME')
        self.assertEqual(data['dateExport'], '2024-03-01')
        self.assertEqual(data['lines'][0]['quantity'], 3)
        self.assertEqual(data['lines'][0]['unitPrice'], '2.5000')
        self.assertEqual(data['lines'][0]['amount'], '7.50')
        self.assertEqual(data['lines'][1]['quantity'], 0)
        self.assertEqual(data['lines'][1]['unitPrice'], '0.0000')
        self.assertEqual(data['lines'][0]['exportId'], data['id'])
        self.assertEqual(data['total'], '7.50')

    def test_line_ids_are_hex(self):
        data = self.create_export([{'modele': 'M-01'}]).data
        self.assertEqual(len(data['lines'][0]['id']), 32)

    def test_update_reorders_and_drops_lines(self):
        data = self.create_export([{'modele': 'A'}, {'modele': 'B'}, {'modele': 'C'}]).data
        a, b, c = data['lines']

        response = self.client.put(self.detail_url(data['id']), {
            'clientId': str(self.acme.id),
            'lines': [
                {**c, 'quantity': '7'},
                {**a},
                {'modele': 'D'},
            ],
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        lines = response.data['lines']
        self.assertEqual([line['modele'] for line in lines], ['C', 'A', 'D'])
        self.assertEqual(lines[0]['id'], c['id'])
        self.assertEqual(lines[0]['quantity'], 7)
        self.assertEqual(lines[1]['id'], a['id'])
        self.assertNotIn(b['id'], [line['id'] for line in lines])

    def test_update_header_keeps_lines(self):
        data = self.create_export([{'modele': 'A'}]).data
        response = self.client.patch(self.detail_url(data['id']), {'lot': 'L-7'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['lot'], 'L-7')
        self.assertEqual(len(response.data['lines']), 1)

    def test_empty_lines_clear_document(self):
        data = self.create_export([{'modele': 'A'}]).data
        response = self.client.put(self.detail_url(data['id']), {'lines': []}, format='json')
        self.assertEqual(response.data['lines'], [])

    def test_totals(self):
        data = self.create_export([
            {'quantity': 3, 'unitPrice': '2.5'},
            {'quantity': 1, 'unitPrice': '100', 'isExcluded': True},
        ]).data
        response = self.client.get(reverse('export-totals', args=[data['id']]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['total'], '7.50')
        self.assertEqual(response.data['formatted'], '7.50 €')
        self.assertEqual(response.data['lines'][1]['amount'], '100.00')

    def test_price_too_high_is_422(self):
        response = self.create_export([{'unitPrice': '99999999999'}])
        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertEqual(response.data['error'], 'Ligne 1 : prix unitaire trop élevé.')

    def test_oversized_quantity_is_422(self):
        response = self.create_export([{'quantity': '9' * 5000}])
        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertEqual(response.data['error'], 'Ligne 1 : quantité trop élevée.')

    def test_commande_too_long_is_422(self):
        response = self.create_export([{'commande': 'C' * 300}])
        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertEqual(response.data['error'], 'Ligne 1 : commande trop long (255 caractères max).')

    def test_numero_too_long_is_400(self):
        response = self.create_export([], numero='N' * 101)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(DeclarationExport.objects.exists())

    def test_largest_storable_line_amount(self):
        response = self.create_export([{'quantity': 2147483647, 'unitPrice': '9999999999.5'}])
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['lines'][0]['amount'], '21474836468926258176.50')
        self.assertEqual(response.data['total'], '21474836468926258176.50')

    def test_list_is_light_and_filtered(self):
        self.create_export([{'modele': 'A'}], numero='EXP-00001')
        self.create_export([], numero='EXP-00002', clientName='Bolt')

        response = self.client.get(self.url)
        self.assertEqual(len(response.data), 2)
        self.assertNotIn('lines', response.data[0])

        by_search = self.client.get(self.url, {'search': 'bolt'})
        self.assertEqual([e['numero'] for e in by_search.data], ['EXP-00002'])

        tomorrow = (timezone.localdate() + timedelta(days=1)).isoformat()
        self.assertEqual(self.client.get(self.url, {'dateDebut': tomorrow}).data, [])
        self.assertEqual(len(self.client.get(self.url, {'dateFin': tomorrow}).data), 2)

    def test_other_user_export_is_404(self):
        data = self.create_export([{'modele': 'A'}]).data
        self.client.force_authenticate(user=self.other)
        self.assertEqual(self.client.get(self.detail_url(data['id'])).status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self.client.get(self.url).data, [])

    def test_admin_sees_everything(self):
        data = self.create_export().data
        self.other.role = ROLE_ADMIN
        self.other.save()
        self.client.force_authenticate(user=self.other)
        self.assertEqual(self.client.get(self.detail_url(data['id'])).status_code, status.HTTP_200_OK)

    def test_foreign_client_is_404(self):
        foreign = Client.objects.create(name='Autre', created_by=self.other)
        response = self.create_export(clientId=str(foreign.id))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_lecteur_cannot_write(self):
        self.user.role = ROLE_LECTEUR
        self.user.save()
        self.assertEqual(self.create_export().status_code, status.HTTP_403_FORBIDDEN)

    def test_delete(self):
        data = self.create_export([{'modele': 'A'}]).data
        response = self.client.delete(self.detail_url(data['id']))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(DeclarationExport.objects.filter(id=data['id']).exists())
