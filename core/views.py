"""
Vues génériques des documents à lignes (exports, livraisons).
"""

from django.db.models import Q
from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .mixins import OwnedQuerysetMixin
from .permissions import IsGestionnaireOrReadOnly, IsOwnerOrAdmin
from .utils import parse_date


class DocumentViewSet(OwnedQuerysetMixin, viewsets.ModelViewSet):
    """
    CRUD d'un document à lignes ; l'enregistrement est délégué au service
    (voir core.services.DocumentService).

    GET    /                → liste (?search=, ?dateDebut=, ?dateFin=)
    POST   /                → créer (en-tête + lignes)
    GET    /{id}/           → détail avec lignes
    PUT    /{id}/           → remplacer en-tête et lignes
    DELETE /{id}/           → supprimer (soft delete)

    Sous-classes :
        service                → DocumentService concret
        serializer_class       → détail (lignes imbriquées)
        list_serializer_class  → liste
    """
    service               = None
    list_serializer_class = None
    permission_classes    = [IsAuthenticated, IsGestionnaireOrReadOnly, IsOwnerOrAdmin]

    def get_queryset(self):
        qs = super().get_queryset()
        if self.action != 'list':
            return qs

        params = self.request.query_params
        search = (params.get('search') or '').strip()
        if search:
            qs = qs.filter(Q(numero__icontains=search) | Q(client_name__icontains=search))
        return qs.created_between(parse_date(params.get('dateDebut')), parse_date(params.get('dateFin')))

    def get_serializer_class(self):
        if self.action == 'list' and self.list_serializer_class:
            return self.list_serializer_class
        return self.serializer_class

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        document = self.service.save(serializer.validated_data, request.user)
        return Response(self.get_serializer(document).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=kwargs.get('partial', False))
        serializer.is_valid(raise_exception=True)
        document = self.service.save(serializer.validated_data, request.user, instance=instance)
        # Les lignes préchargées par get_queryset() sont périmées
        document._prefetched_objects_cache = {}
        return Response(self.get_serializer(document).data)

    def destroy(self, request, *args, **kwargs):
        self.service.delete(self.get_object(), request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
