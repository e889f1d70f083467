"""
URLs de l'application Livraisons.
Préfixées par /api/v1/livraisons/

  GET/POST     /          → liste + créer
  GET/PUT/DEL  /{id}/     → détail (lignes imbriquées)
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import LivraisonViewSet

router = DefaultRouter()
router.register(r'', LivraisonViewSet, basename='livraison')

urlpatterns = [
    path('', include(router.urls)),
]
