"""
Vues de l'application Exports.
"""

from rest_framework.decorators import action
from rest_framework.response import Response

from core.views import DocumentViewSet

from .models import DeclarationExport
from .serializers import DeclarationExportListSerializer, DeclarationExportSerializer
from .services.export_service import ExportService


class DeclarationExportViewSet(DocumentViewSet):
    """
    Déclarations d'export (voir DocumentViewSet pour le CRUD).

    GET /{id}/totals/ → montant par ligne et total HT (lignes exclues non comptées)
    """
    queryset = DeclarationExport.objects.select_related('client').prefetch_related('lines')
    serializer_class      = DeclarationExportSerializer
    list_serializer_class = DeclarationExportListSerializer
    service               = ExportService

    @action(detail=True, methods=['get'], url_path='totals')
    def totals(self, request, pk=None):
        totals = ExportService.totals(self.get_object())
        return Response({
            'lines': [
                {**line, 'amount': str(line['amount'])}
                for line in totals['lines']
            ],
            'total':     str(totals['total']),
            'formatted': totals['formatted'],
        })
