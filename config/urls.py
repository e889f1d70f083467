"""
Configuration des URLs de GestExport.

Toutes les routes de l'API sont préfixées par /api/v1/

Structure :
    /admin/                      → Django Admin
    /api/v1/auth/                → Authentification (JWT)
    /api/v1/clients/             → Clients + catalogue d'un client
    /api/v1/client-models/       → Modèles clients (commandes, variantes)
    /api/v1/commandes/           → Commandes
    /api/v1/exports/             → Déclarations d'export (lignes imbriquées)
    /api/v1/livraisons/          → Livraisons (lignes imbriquées)
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

# ── Admin ─────────────────────────────────────────────────────
admin.site.site_header = 'GestExport'
admin.site.site_title  = 'GestExport Admin'
admin.site.index_title = 'Tableau de bord administration'

# ── URL patterns ─────────────────────────────────────────────
urlpatterns = [

    # Administration Django
    path('admin/', admin.site.urls),

    # ── Authentification ──────────────────────────────────────
    # POST /api/v1/auth/login/, /token/refresh/ ; GET /me/
    path('api/v1/auth/', include('apps.authentication.urls')),

    # ── Documents ─────────────────────────────────────────────
    # GET/POST /api/v1/exports/
    # GET      /api/v1/exports/{id}/totals/
    path('api/v1/exports/',    include('apps.exports.urls')),
    path('api/v1/livraisons/', include('apps.livraisons.urls')),

    # ── Référentiels ──────────────────────────────────────────
    path('api/v1/commandes/',  include('apps.commandes.urls')),

    # GET /api/v1/clients/{id}/models/
    # DELETE /api/v1/client-models/ {"id": "..."}
    path('api/v1/',            include('apps.clients.urls')),

]

# ── Fichiers statiques (dev uniquement) ───────────────────────
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
