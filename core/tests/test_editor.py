"""
Tests de l'éditeur de lignes (core/lines/editor.py).

Chaque opération renvoie un NOUVEAU document : on vérifie que le
document d'origine n'est jamais modifié et que les autres lignes
restent identiques.
"""

from decimal import Decimal

from django.test import SimpleTestCase

from core.lines import (
    CatalogEntry, ExportLine, LineDocument, LivraisonLine,
    export_editor, livraison_editor,
)
from core.lines.coercion import QUANTITY_CEILING


CATALOG = [
    {'name': 'M-01', 'commandes': 'OPR1,OPR2', 'description': 'Chemise'},
    CatalogEntry(name='M-02', commandes='OPR3', description='Pantalon'),
]


def make_document(count=3):
    lines = [
        ExportLine(id=f'l{i}', modele=f'X{i}', quantity=i + 1, unit_price=Decimal('1.5'), parent_id='42')
        for i in range(count)
    ]
    return LineDocument(id='42', client_name='ACME', lines=lines)


class AddRemoveLineTest(SimpleTestCase):

    def test_add_line_appends_default_line(self):
        document = export_editor.add_line(make_document(2))
        line = document.lines[-1]
        self.assertEqual(len(document.lines), 3)
        self.assertEqual(line.quantity, 1)
        self.assertEqual(line.unit_price, Decimal('0'))
        self.assertFalse(line.is_excluded)
        self.assertEqual(line.parent_id, '42')

    def test_add_line_generates_distinct_ids(self):
        document = LineDocument()
        document = export_editor.add_line(export_editor.add_line(document))
        self.assertNotEqual(document.lines[0].id, document.lines[1].id)

    def test_add_line_does_not_modify_original(self):
        original = make_document(1)
        export_editor.add_line(original)
        self.assertEqual(len(original.lines), 1)

    def test_livraison_editor_adds_livraison_line(self):
        document = livraison_editor.add_line(LineDocument(id='7'))
        self.assertIsInstance(document.lines[0], LivraisonLine)

    def test_remove_line_shifts_following(self):
        document = export_editor.remove_line(make_document(3), 1)
        self.assertEqual([line.id for line in document.lines], ['l0', 'l2'])

    def test_remove_out_of_range_returns_same_document(self):
        original = make_document(2)
        self.assertIs(export_editor.remove_line(original, 5), original)
        self.assertIs(export_editor.remove_line(original, -1), original)

    def test_edit_remove_only_line_then_add(self):
        document = export_editor.update_field(make_document(1), 0, 'quantity', '9')
        document = export_editor.remove_line(document, 0)
        document = export_editor.add_line(document)
        line = document.lines[0]
        self.assertEqual(len(document.lines), 1)
        self.assertEqual(line.quantity, 1)
        self.assertEqual(line.unit_price, Decimal('0'))
        self.assertFalse(line.is_excluded)
        self.assertNotEqual(line.id, 'l0')


class UpdateFieldTest(SimpleTestCase):

    def test_quantity_and_price_give_amount(self):
        document = export_editor.add_line(LineDocument(id='42'))
        document = export_editor.update_field(document, 0, 'quantity', '3')
        document = export_editor.update_field(document, 0, 'unitPrice', '2.5')
        self.assertEqual(export_editor.line_amount(document.lines[0]), Decimal('7.50'))

    def test_other_lines_are_unchanged(self):
        original = make_document(3)
        document = export_editor.update_field(original, 1, 'description', 'Nouveau')
        self.assertEqual(document.lines[1].description, 'Nouveau')
        self.assertEqual(document.lines[0], original.lines[0])
        self.assertEqual(document.lines[2], original.lines[2])
        self.assertEqual(original.lines[1].description, '')

    def test_very_long_quantity_does_not_raise(self):
        document = export_editor.update_field(make_document(1), 0, 'quantity', '9' * 5000)
        self.assertEqual(document.lines[0].quantity, QUANTITY_CEILING)

    def test_empty_quantity_becomes_zero(self):
        document = export_editor.update_field(make_document(1), 0, 'quantity', '')
        self.assertEqual(document.lines[0].quantity, 0)

    def test_attribute_name_is_accepted(self):
        document = export_editor.update_field(make_document(1), 0, 'is_excluded', 'on')
        self.assertTrue(document.lines[0].is_excluded)

    def test_unknown_field_returns_same_document(self):
        original = make_document(1)
        self.assertIs(export_editor.update_field(original, 0, 'couleur', 'rouge'), original)

    def test_price_is_not_a_livraison_field(self):
        original = LineDocument(lines=[LivraisonLine(id='a')])
        self.assertIs(livraison_editor.update_field(original, 0, 'unitPrice', '3'), original)

    def test_out_of_range_returns_same_document(self):
        original = make_document(1)
        self.assertIs(export_editor.update_field(original, 3, 'quantity', '2'), original)


class BindModelTest(SimpleTestCase):

    def test_known_model_overwrites_commande_and_description(self):
        document = export_editor.update_field(make_document(1), 0, 'description', 'saisie manuelle')
        document = export_editor.bind_model(document, 0, 'M-01', CATALOG)
        line = document.lines[0]
        self.assertEqual(line.modele, 'M-01')
        self.assertEqual(line.commande, 'OPR1,OPR2')
        self.assertEqual(line.description, 'Chemise')

    def test_catalog_entry_objects_are_accepted(self):
        document = export_editor.bind_model(make_document(1), 0, 'M-02', CATALOG)
        self.assertEqual(document.lines[0].commande, 'OPR3')

    def test_unknown_model_clears_fields(self):
        document = export_editor.bind_model(make_document(1), 0, 'M-01', CATALOG)
        document = export_editor.bind_model(document, 0, 'INCONNU', CATALOG)
        line = document.lines[0]
        self.assertEqual(line.modele, 'INCONNU')
        self.assertEqual(line.commande, '')
        self.assertEqual(line.description, '')

    def test_quantity_and_price_are_kept(self):
        original = make_document(2)
        document = export_editor.bind_model(original, 1, 'M-01', CATALOG)
        self.assertEqual(document.lines[1].quantity, original.lines[1].quantity)
        self.assertEqual(document.lines[1].unit_price, original.lines[1].unit_price)

    def test_match_is_exact(self):
        document = export_editor.bind_model(make_document(1), 0, 'm-01', CATALOG)
        self.assertEqual(document.lines[0].commande, '')


class ByIdTest(SimpleTestCase):

    def test_index_of(self):
        document = make_document(3)
        self.assertEqual(export_editor.index_of(document, 'l2'), 2)
        self.assertIsNone(export_editor.index_of(document, 'absent'))

    def test_update_by_id_survives_removal(self):
        document = export_editor.remove_line(make_document(3), 0)
        document = export_editor.update_field_by_id(document, 'l2', 'quantity', '9')
        self.assertEqual(document.lines[1].quantity, 9)

    def test_unknown_id_returns_same_document(self):
        original = make_document(1)
        self.assertIs(export_editor.update_field_by_id(original, 'absent', 'quantity', '9'), original)
        self.assertIs(export_editor.remove_line_by_id(original, 'absent'), original)

    def test_bind_model_by_id(self):
        document = export_editor.bind_model_by_id(make_document(2), 'l1', 'M-02', CATALOG)
        self.assertEqual(document.lines[1].description, 'Pantalon')


class TotalTest(SimpleTestCase):

    def test_excluded_lines_do_not_count(self):
        document = LineDocument(lines=[
            ExportLine(id='a', quantity=2, unit_price=Decimal('10')),
            ExportLine(id='b', quantity=1, unit_price=Decimal('5'), is_excluded=True),
        ])
        self.assertEqual(export_editor.total(document), Decimal('20.00'))
        self.assertEqual(len(document.lines), 2)

    def test_empty_document_total_is_zero(self):
        self.assertEqual(export_editor.total(LineDocument()), Decimal('0.00'))

    def test_amount_is_rounded_half_up(self):
        line = ExportLine(id='a', quantity=1, unit_price=Decimal('0.125'))
        self.assertEqual(export_editor.line_amount(line), Decimal('0.13'))

    def test_amount_beyond_default_precision(self):
        line = ExportLine(id='a', quantity=10 ** 27, unit_price=Decimal('1.005'))
        self.assertEqual(export_editor.line_amount(line), Decimal(f"{1005 * 10 ** 24}.00"))

    def test_total_beyond_default_precision(self):
        document = LineDocument(lines=[
            ExportLine(id='a', quantity=10 ** 27, unit_price=Decimal('1')),
            ExportLine(id='b', quantity=1, unit_price=Decimal('0.01')),
        ])
        self.assertEqual(export_editor.total(document), Decimal(f"{10 ** 27}.01"))
        self.assertEqual(export_editor.format_amount(Decimal(10 ** 27)), f"{10 ** 27}.00 €")

    def test_format_amount(self):
        self.assertEqual(export_editor.format_amount(Decimal('7.5')), '7.50 €')

    def test_total_quantity(self):
        self.assertEqual(livraison_editor.total_quantity(make_document(3)), 6)
