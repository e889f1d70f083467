"""
Serializers de l'application Clients.

Le format JSON des modèles clients suit celui du frontend :
    {
        "id": "...", "name": "M-01", "description": "...",
        "commandes": "OPR1,OPR2",
        "commandesWithVariants": [{"value": "OPR1", "variants": [{"name": "defaut", "qte_variante": 3}]}],
        "variants": [{"id": "...", "name": "OPR1:defaut", "qte_variante": 3}],
        "lotto": "", "ordine": "", "puht": "12.5000",
        "clientId": "...", "client": {"id": "...", "name": "ACME"}
    }
`commandes` et `variants` sont calculés par ClientModelService.
"""

from rest_framework import serializers

from core.constants import MAX_CODE_LENGTH, PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS
from core.serializers import LenientIntegerField, LenientTextField

from .models import Client, ClientModel, Variant


class ClientSerializer(serializers.ModelSerializer):

    class Meta:
        model  = Client
        fields = ['id', 'name', 'email', 'phone', 'address', 'description', 'created_at']
        read_only_fields = ['id', 'created_at']


class ClientSummarySerializer(serializers.ModelSerializer):
    """Version minimale, imbriquée dans les modèles et les documents."""

    class Meta:
        model  = Client
        fields = ['id', 'name']


# ============================================================
# COMMANDES ET VARIANTES (saisie structurée)
# ============================================================

class VariantEntrySerializer(serializers.Serializer):
    name         = LenientTextField(required=False, default='')
    qte_variante = LenientIntegerField(required=False, default=0)


class CommandeEntrySerializer(serializers.Serializer):
    value    = LenientTextField(required=False, default='')
    variants = VariantEntrySerializer(many=True, required=False)


class VariantSerializer(serializers.ModelSerializer):

    class Meta:
        model  = Variant
        fields = ['id', 'name', 'qte_variante']


# ============================================================
# MODÈLE CLIENT
# ============================================================

class ClientModelSerializer(serializers.ModelSerializer):
    clientId = serializers.UUIDField(source='client_id')
    client   = ClientSummarySerializer(read_only=True)
    commandesWithVariants = CommandeEntrySerializer(
        source='commandes_with_variants', many=True, required=False,
    )
    variants = VariantSerializer(many=True, read_only=True)
    lotto    = serializers.CharField(max_length=MAX_CODE_LENGTH, required=False, allow_blank=True, allow_null=True)
    ordine   = serializers.CharField(max_length=MAX_CODE_LENGTH, required=False, allow_blank=True, allow_null=True)
    puht     = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES,
        required=False, allow_null=True,
    )
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    commandes   = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    createdAt   = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model  = ClientModel
        fields = [
            'id', 'name', 'description', 'commandes', 'commandesWithVariants',
            'variants', 'lotto', 'ordine', 'puht', 'clientId', 'client', 'createdAt',
        ]
        read_only_fields = ['id']
