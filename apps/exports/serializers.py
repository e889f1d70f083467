"""
Serializers de l'application Exports.

Format JSON d'une déclaration :
    {
        "id": "...", "clientId": "...", "clientName": "ACME",
        "numero": "EXP-00042", "dateExport": "2024-03-01", "lot": "", "notes": "",
        "lines": [
            {"id": "...", "commande": "OPR1", "modele": "M-01", "description": "",
             "quantity": 3, "unitPrice": "2.5000", "isExcluded": false,
             "amount": "7.50", "exportId": "..."}
        ],
        "total": "7.50"
    }
Les champs de ligne sont convertis sans erreur (voir core.serializers).
"""

from rest_framework import serializers

from core.constants import DEFAULT_LINE_UNIT_PRICE, MAX_NAME_LENGTH, MAX_REFERENCE_LENGTH
from core.serializers import DocumentLineSerializer, LenientBooleanField, LenientDecimalField

from .models import DeclarationExport


class ExportLineSerializer(DocumentLineSerializer):
    unitPrice  = LenientDecimalField(source='unit_price', required=False, default=DEFAULT_LINE_UNIT_PRICE)
    isExcluded = LenientBooleanField(source='is_excluded', required=False, default=False)
    amount     = serializers.DecimalField(max_digits=None, decimal_places=2, read_only=True)
    exportId   = serializers.UUIDField(source='declaration_id', read_only=True)


class DeclarationExportSerializer(serializers.ModelSerializer):
    clientId   = serializers.UUIDField(source='client_id', required=False, allow_null=True)
    clientName = serializers.CharField(source='client_name', max_length=MAX_NAME_LENGTH, required=False, allow_blank=True, allow_null=True)
    dateExport = serializers.DateField(source='date_export', required=False, allow_null=True)
    numero     = serializers.CharField(max_length=MAX_REFERENCE_LENGTH, required=False, allow_blank=True, allow_null=True)
    lot        = serializers.CharField(max_length=MAX_REFERENCE_LENGTH, required=False, allow_blank=True, allow_null=True)
    notes      = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    lines      = ExportLineSerializer(many=True, required=False)
    total      = serializers.DecimalField(max_digits=None, decimal_places=2, read_only=True)
    createdAt  = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt  = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model  = DeclarationExport
        fields = [
            'id', 'clientId', 'clientName', 'numero', 'dateExport', 'lot',
            'notes', 'lines', 'total', 'createdAt', 'updatedAt',
        ]
        read_only_fields = ['id']


class DeclarationExportListSerializer(serializers.ModelSerializer):
    """Version allégée pour les listes (sans les lignes)."""
    clientId   = serializers.UUIDField(source='client_id', read_only=True)
    clientName = serializers.CharField(source='client_name', read_only=True)
    dateExport = serializers.DateField(source='date_export', read_only=True)
    lineCount  = serializers.IntegerField(source='lines.count', read_only=True)
    createdAt  = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model  = DeclarationExport
        fields = ['id', 'clientId', 'clientName', 'numero', 'dateExport', 'lot', 'lineCount', 'createdAt']
