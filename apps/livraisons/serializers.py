"""
Serializers de l'application Livraisons.

Format JSON d'une livraison :
    {
        "id": "...", "clientId": "...", "clientName": "ACME",
        "numero": "LIV-00007", "dateLivraison": "2024-03-01",
        "adresse": "...", "notes": "",
        "lines": [
            {"id": "...", "modele": "M-01", "commande": "OPR1",
             "description": "", "quantity": 12, "livraisonId": "..."}
        ],
        "totalQuantity": 12
    }
"""

from rest_framework import serializers

from core.constants import MAX_NAME_LENGTH, MAX_REFERENCE_LENGTH
from core.serializers import DocumentLineSerializer

from .models import Livraison


class LivraisonLineSerializer(DocumentLineSerializer):
    livraisonId = serializers.UUIDField(source='livraison_id', read_only=True)


class LivraisonSerializer(serializers.ModelSerializer):
    clientId      = serializers.UUIDField(source='client_id', required=False, allow_null=True)
    clientName    = serializers.CharField(source='client_name', max_length=MAX_NAME_LENGTH, required=False, allow_blank=True, allow_null=True)
    dateLivraison = serializers.DateField(source='date_livraison', required=False, allow_null=True)
    numero        = serializers.CharField(max_length=MAX_REFERENCE_LENGTH, required=False, allow_blank=True, allow_null=True)
    adresse       = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    notes         = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    lines         = LivraisonLineSerializer(many=True, required=False)
    totalQuantity = serializers.IntegerField(source='total_quantity', read_only=True)
    createdAt     = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt     = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model  = Livraison
        fields = [
            'id', 'clientId', 'clientName', 'numero', 'dateLivraison', 'adresse',
            'notes', 'lines', 'totalQuantity', 'createdAt', 'updatedAt',
        ]
        read_only_fields = ['id']


class LivraisonListSerializer(serializers.ModelSerializer):
    clientId      = serializers.UUIDField(source='client_id', read_only=True)
    clientName    = serializers.CharField(source='client_name', read_only=True)
    dateLivraison = serializers.DateField(source='date_livraison', read_only=True)
    lineCount     = serializers.IntegerField(source='lines.count', read_only=True)
    createdAt     = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model  = Livraison
        fields = ['id', 'clientId', 'clientName', 'numero', 'dateLivraison', 'lineCount', 'createdAt']
