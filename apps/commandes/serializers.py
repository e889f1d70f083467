from rest_framework import serializers

from .models import Commande


class CommandeSerializer(serializers.ModelSerializer):
    # Longueur et contenu contrôlés par CommandeService (messages homogènes)
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model  = Commande
        fields = ['id', 'name', 'createdAt']
        read_only_fields = ['id']
