"""
Filtres de la liste des modèles clients (django-filter).

    GET /api/v1/client-models/?search=OPR&dateDebut=2024-01-01&dateFin=2024-03-31&client=<uuid>

Les paramètres gardent les noms du frontend (camelCase).
"""

import django_filters
from django.db.models import Q

from .models import ClientModel


class ClientModelFilter(django_filters.FilterSet):
    search    = django_filters.CharFilter(method='filter_search')
    dateDebut = django_filters.DateFilter(field_name='created_at', lookup_expr='date__gte')
    dateFin   = django_filters.DateFilter(field_name='created_at', lookup_expr='date__lte')
    client    = django_filters.UUIDFilter(field_name='client_id')

    class Meta:
        model  = ClientModel
        fields = ['search', 'dateDebut', 'dateFin', 'client']

    def filter_search(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(name__icontains=value) |
            Q(description__icontains=value) |
            Q(commandes__icontains=value) |
            Q(client__name__icontains=value)
        )
