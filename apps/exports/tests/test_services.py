"""
Tests du service des déclarations d'export.
"""

from decimal import Decimal

from django.test import TestCase

from apps.authentication.models import User
from apps.clients.models import Client
from apps.exports.models import DeclarationExport
from apps.exports.services.export_service import ExportService
from core.exceptions import DocumentLinesError, NotFoundError
from core.signals import document_saved


class ExportServiceTest(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(email='gest@example.com', password='SecurePass123!')
        self.acme = Client.objects.create(name='ACME', created_by=self.user)

    def save(self, lines, instance=None, **data):
        return ExportService.save_declaration({'client_id': self.acme.id, 'lines': lines, **data},
                                              self.user, instance=instance)

    def test_lines_are_saved_in_order(self):
        declaration = self.save([
            {'modele': 'M-01', 'quantity': '3', 'unit_price': '2,5'},
            {'modele': 'M-02', 'quantity': '', 'is_excluded': 'on'},
        ], numero='EXP-00001')

        lines = list(declaration.lines.all())
        self.assertEqual([line.modele for line in lines], ['M-01', 'M-02'])
        self.assertEqual([line.position for line in lines], [0, 1])
        self.assertEqual(lines[0].unit_price, Decimal('2.5'))
        self.assertEqual(lines[1].quantity, 0)
        self.assertTrue(lines[1].is_excluded)
        self.assertEqual(declaration.client_name, 'ACME')
        self.assertEqual(declaration.numero, 'EXP-00001')

    def test_replace_lines_keeps_known_ids(self):
        declaration = self.save([{'modele': 'A'}, {'modele': 'B'}, {'modele': 'C'}])
        a, b, c = declaration.lines.all()

        self.save([
            {'id': c.id.hex, 'modele': 'C'},
            {'id': a.id.hex, 'modele': 'A2'},
        ], instance=declaration)

        lines = list(declaration.lines.all())
        self.assertEqual([line.id for line in lines], [c.id, a.id])
        self.assertEqual([line.modele for line in lines], ['C', 'A2'])
        self.assertFalse(declaration.lines.filter(id=b.id).exists())

    def test_unknown_or_duplicate_ids_are_regenerated(self):
        declaration = self.save([{'modele': 'A'}])
        known = declaration.lines.get().id

        self.save([
            {'id': known.hex, 'modele': 'A'},
            {'id': known.hex, 'modele': 'copie'},
            {'id': 'pas-un-uuid', 'modele': 'B'},
        ], instance=declaration)

        ids = list(declaration.lines.values_list('id', flat=True))
        self.assertEqual(ids[0], known)
        self.assertEqual(len(set(ids)), 3)

    def test_header_only_update_keeps_lines(self):
        declaration = self.save([{'modele': 'A'}])
        ExportService.save_declaration({'lot': 'L-7'}, self.user, instance=declaration)
        declaration.refresh_from_db()
        self.assertEqual(declaration.lot, 'L-7')
        self.assertEqual(declaration.lines.count(), 1)

    def test_explicit_client_name_wins(self):
        declaration = self.save([], client_name='  ACME Export  ')
        self.assertEqual(declaration.client_name, 'ACME Export')

    def test_foreign_client(self):
        other = User.objects.create_user(email='autre@example.com', password='SecurePass123!')
        foreign = Client.objects.create(name='Autre', created_by=other)
        with self.assertRaises(NotFoundError):
            ExportService.save_declaration({'client_id': foreign.id, 'lines': []}, self.user)

    def test_price_too_high_rolls_back(self):
        with self.assertRaises(DocumentLinesError):
            self.save([{'unit_price': '10000000000'}])
        self.assertFalse(DeclarationExport.objects.exists())

    def test_quantity_too_high(self):
        with self.assertRaises(DocumentLinesError):
            self.save([{'quantity': 2147483648}])

    def test_oversized_quantity_string_is_refused(self):
        with self.assertRaises(DocumentLinesError):
            self.save([{'quantity': '9' * 5000}])

    def test_commande_longer_than_column_is_refused(self):
        with self.assertRaises(DocumentLinesError) as ctx:
            self.save([{'modele': 'A'}, {'commande': 'C' * 256}])
        self.assertEqual(str(ctx.exception.detail), 'Ligne 2 : commande trop long (255 caractères max).')
        self.assertFalse(DeclarationExport.objects.exists())

    def test_commande_at_column_length_is_kept(self):
        declaration = self.save([{'commande': 'C' * 255}])
        self.assertEqual(len(declaration.lines.get().commande), 255)

    def test_header_longer_than_column_is_refused(self):
        with self.assertRaises(DocumentLinesError):
            self.save([], numero='N' * 101)
        self.assertFalse(DeclarationExport.objects.exists())

    def test_price_is_rounded_to_4_places(self):
        declaration = self.save([{'unit_price': '1.23456'}])
        self.assertEqual(declaration.lines.get().unit_price, Decimal('1.2346'))

    def test_totals(self):
        declaration = self.save([
            {'quantity': 3, 'unit_price': '2.5'},
            {'quantity': 1, 'unit_price': '100', 'is_excluded': True},
        ])
        totals = ExportService.totals(declaration)
        self.assertEqual(totals['total'], Decimal('7.50'))
        self.assertEqual(totals['formatted'], '7.50 €')
        self.assertEqual([line['amount'] for line in totals['lines']], [Decimal('7.50'), Decimal('100.00')])

    def test_document_saved_signal(self):
        received = []

        def on_saved(sender, **kwargs):
            received.append(kwargs)

        document_saved.connect(on_saved)
        self.addCleanup(document_saved.disconnect, on_saved)

        declaration = self.save([])
        self.assertEqual(received[0]['kind'], 'export')
        self.assertTrue(received[0]['created'])
        self.assertEqual(received[0]['document'], declaration)

    def test_delete_is_soft(self):
        declaration = self.save([{'modele': 'A'}])
        ExportService.delete(declaration, self.user)
        self.assertFalse(DeclarationExport.objects.filter(id=declaration.id).exists())
        self.assertTrue(DeclarationExport.all_objects.filter(id=declaration.id).exists())
