"""
URLs de l'application Commandes.
Préfixées par /api/v1/commandes/

  GET   /   → liste (?search=)
  POST  /   → créer
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import CommandeViewSet

router = DefaultRouter()
router.register(r'', CommandeViewSet, basename='commande')

urlpatterns = [
    path('', include(router.urls)),
]
