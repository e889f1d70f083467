"""
Vues de l'application Livraisons (CRUD : voir core.views.DocumentViewSet).
"""

from core.views import DocumentViewSet

from .models import Livraison
from .serializers import LivraisonListSerializer, LivraisonSerializer
from .services.livraison_service import LivraisonService


class LivraisonViewSet(DocumentViewSet):
    queryset = Livraison.objects.select_related('client').prefetch_related('lines')
    serializer_class      = LivraisonSerializer
    list_serializer_class = LivraisonListSerializer
    service               = LivraisonService
