"""
URLs de l'application Exports.
Préfixées par /api/v1/exports/

  GET/POST     /               → liste + créer
  GET/PUT/DEL  /{id}/          → détail (lignes imbriquées)
  GET          /{id}/totals/   → montants et total
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import DeclarationExportViewSet

router = DefaultRouter()
router.register(r'', DeclarationExportViewSet, basename='export')

urlpatterns = [
    path('', include(router.urls)),
]
