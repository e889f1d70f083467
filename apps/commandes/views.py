"""
Vues de l'application Commandes.
"""

from rest_framework import mixins, status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.mixins import OwnedQuerysetMixin
from core.permissions import IsGestionnaireOrReadOnly

from .models import Commande
from .serializers import CommandeSerializer
from .services.commande_service import CommandeService


class CommandeViewSet(OwnedQuerysetMixin,
                      mixins.ListModelMixin,
                      mixins.CreateModelMixin,
                      viewsets.GenericViewSet):
    """
    GET  /            → liste (?search= sur le nom ou l'identifiant)
    POST /            → créer {"name": "OPR3328"}
    """
    queryset           = Commande.objects.all()
    serializer_class   = CommandeSerializer
    permission_classes = [IsAuthenticated, IsGestionnaireOrReadOnly]

    def get_queryset(self):
        qs = super().get_queryset()
        return CommandeService.search(qs, self.request.query_params.get('search'))

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        commande = CommandeService.create(serializer.validated_data['name'], request.user)
        return Response(self.get_serializer(commande).data, status=status.HTTP_201_CREATED)
