"""
Champs et serializers partagés par les documents à lignes.

Les champs "Lenient*" ne produisent JAMAIS d'erreur de validation :
ils délèguent à core.lines.coercion. Un document envoyé avec
"quantity": "" est enregistré avec une quantité 0, pas rejeté.
"""

import uuid

from rest_framework import serializers

from .lines.coercion import coerce_flag, coerce_price, coerce_quantity, coerce_text


class LenientField(serializers.Field):
    """Champ dont la conversion ne lève pas d'erreur ; None est converti aussi."""

    coerce = staticmethod(coerce_text)

    def validate_empty_values(self, data):
        if data is None and not self.read_only:
            return (True, self.to_internal_value(None))
        return super().validate_empty_values(data)

    def to_internal_value(self, data):
        return self.coerce(data)

    def to_representation(self, value):
        return value


class LenientTextField(LenientField):
    coerce = staticmethod(coerce_text)


class LenientIntegerField(LenientField):
    coerce = staticmethod(coerce_quantity)

    def to_representation(self, value):
        return int(value)


class LenientDecimalField(LenientField):
    """Sortie en chaîne, comme serializers.DecimalField."""
    coerce = staticmethod(coerce_price)

    def to_representation(self, value):
        return str(value)


class LenientBooleanField(LenientField):
    coerce = staticmethod(coerce_flag)

    def to_representation(self, value):
        return bool(value)


class DocumentLineSerializer(serializers.Serializer):
    """
    Champs communs aux lignes d'export et de livraison.

    `id` est l'identifiant généré côté client : il est conservé à
    l'enregistrement quand la ligne existe déjà dans le document.
    """
    id          = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    commande    = LenientTextField(required=False, default='')
    modele      = LenientTextField(required=False, default='')
    description = LenientTextField(required=False, default='')
    quantity    = LenientIntegerField(required=False, default=1)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        line_id = getattr(instance, 'id', None)
        if isinstance(line_id, uuid.UUID):
            data['id'] = line_id.hex
        return data
