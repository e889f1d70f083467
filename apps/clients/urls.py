"""
URLs de l'application Clients.

Préfixe : /api/v1/ (défini dans config/urls.py)

  GET/POST          clients/                  → liste + créer
  GET/PUT/DEL       clients/{id}/             → détail
  GET               clients/{id}/models/      → catalogue du client
  GET/POST/PUT/DEL  client-models/            → liste + créer (PUT/DELETE : id dans le corps)
  GET/PUT/DEL       client-models/{id}/       → détail
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import ClientModelViewSet, ClientViewSet

router = DefaultRouter()
router.register(r'clients', ClientViewSet, basename='client')

client_model_list = ClientModelViewSet.as_view({
    'get':    'list',
    'post':   'create',
    'put':    'update_from_body',
    'delete': 'destroy_from_body',
})
client_model_detail = ClientModelViewSet.as_view({
    'get':    'retrieve',
    'put':    'update',
    'patch':  'partial_update',
    'delete': 'destroy',
})

urlpatterns = [
    path('client-models/',           client_model_list,   name='client-model-list'),
    path('client-models/<uuid:pk>/', client_model_detail, name='client-model-detail'),
    path('', include(router.urls)),
]
