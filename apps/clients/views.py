"""
Vues de l'application Clients.

Les querysets sont limités aux objets de l'utilisateur connecté
(OwnedQuerysetMixin). Un objet d'un autre utilisateur répond 404.
"""

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.exceptions import ValidationError
from core.mixins import AuditMixin, OwnedQuerysetMixin
from core.permissions import IsGestionnaireOrReadOnly, IsOwnerOrAdmin

from .filters import ClientModelFilter
from .models import Client, ClientModel
from .serializers import ClientModelSerializer, ClientSerializer
from .services.client_model_service import ClientModelService


# ============================================================
# VIEWSET : CLIENTS
# ============================================================

class ClientViewSet(OwnedQuerysetMixin, AuditMixin, viewsets.ModelViewSet):
    """
    GET    /                 → liste (?search=nom)
    POST   /                 → créer
    GET    /{id}/            → détail
    PUT    /{id}/            → modifier
    DELETE /{id}/            → supprimer (soft delete)
    GET    /{id}/models/     → catalogue du client (un modèle par nom)
    """
    queryset           = Client.objects.all()
    serializer_class   = ClientSerializer
    permission_classes = [IsAuthenticated, IsGestionnaireOrReadOnly, IsOwnerOrAdmin]

    def get_queryset(self):
        qs = super().get_queryset()
        search = self.request.query_params.get('search')
        if search:
            qs = qs.filter(name__icontains=search.strip())
        return qs

    @action(detail=True, methods=['get'], url_path='models')
    def catalog(self, request, pk=None):
        client = self.get_object()
        models = ClientModel.objects.filter(client=client).select_related('client').order_by('created_at')
        unique = ClientModelService.deduplicate(models)
        return Response(ClientModelSerializer(unique, many=True).data)


# ============================================================
# VIEWSET : MODÈLES CLIENTS
# ============================================================

class ClientModelViewSet(OwnedQuerysetMixin, viewsets.ModelViewSet):
    """
    GET    /                 → liste (?search, ?dateDebut, ?dateFin, ?client)
    POST   /                 → créer
    PUT    /                 → modifier (id dans le corps)
    DELETE /                 → supprimer (id dans le corps)
    GET    /{id}/            → détail
    PUT    /{id}/            → modifier
    DELETE /{id}/            → supprimer (soft delete)
    """
    queryset = ClientModel.objects.select_related('client').prefetch_related('variants')
    serializer_class   = ClientModelSerializer
    filterset_class    = ClientModelFilter
    permission_classes = [IsAuthenticated, IsGestionnaireOrReadOnly, IsOwnerOrAdmin]

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        model = ClientModelService.save_model(serializer.validated_data, request.user)
        return Response(self.get_serializer(model).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=kwargs.get('partial', False))
        serializer.is_valid(raise_exception=True)
        model = ClientModelService.save_model(serializer.validated_data, request.user, instance=instance)
        model._prefetched_objects_cache = {}
        return Response(self.get_serializer(model).data)

    def destroy(self, request, *args, **kwargs):
        ClientModelService.delete_model(self.get_object(), request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # --------------------------------------------------------
    # ROUTES AVEC L'ID DANS LE CORPS
    # --------------------------------------------------------

    def _object_from_body(self, request):
        model_id = request.data.get('id') if hasattr(request.data, 'get') else None
        if not model_id:
            raise ValidationError("L'identifiant du modèle est requis.")
        self.kwargs[self.lookup_field] = model_id
        return self.get_object()

    def update_from_body(self, request, *args, **kwargs):
        self._object_from_body(request)
        return self.update(request, *args, **kwargs)

    def destroy_from_body(self, request, *args, **kwargs):
        self._object_from_body(request)
        return self.destroy(request, *args, **kwargs)
