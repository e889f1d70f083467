"""
Tests des champs tolérants (core/serializers.py).
"""

from decimal import Decimal

from django.test import SimpleTestCase

from apps.exports.serializers import ExportLineSerializer


class LenientLineSerializerTest(SimpleTestCase):

    def test_partial_values_are_never_rejected(self):
        serializer = ExportLineSerializer(data={
            'quantity': '', 'unitPrice': 'abc', 'isExcluded': 'on', 'modele': None,
        })
        self.assertTrue(serializer.is_valid(), serializer.errors)
        data = serializer.validated_data
        self.assertEqual(data['quantity'], 0)
        self.assertEqual(data['unit_price'], Decimal('0'))
        self.assertTrue(data['is_excluded'])
        self.assertEqual(data['modele'], '')

    def test_defaults(self):
        serializer = ExportLineSerializer(data={})
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertEqual(serializer.validated_data['quantity'], 1)
        self.assertEqual(serializer.validated_data['unit_price'], Decimal('0'))
        self.assertFalse(serializer.validated_data['is_excluded'])

    def test_comma_price(self):
        serializer = ExportLineSerializer(data={'unitPrice': '2,5', 'quantity': '3'})
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertEqual(serializer.validated_data['unit_price'], Decimal('2.5'))
        self.assertEqual(serializer.validated_data['quantity'], 3)
