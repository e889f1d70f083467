"""
URLs de l'application Authentication.

Préfixe : /api/v1/auth/ (défini dans config/urls.py)

Méthode  URL               Vue               Description
-------  ----------------  ----------------  ----------------------
POST     /login/           LoginView         Se connecter
POST     /token/refresh/   TokenRefreshView  Renouveler le token
GET      /me/              MeView            Mon profil
PATCH    /me/              MeView            Modifier mon profil
"""

from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import LoginView, MeView

app_name = 'authentication'

urlpatterns = [
    path('login/',         LoginView.as_view(),        name='login'),
    path('token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),
    path('me/',            MeView.as_view(),           name='me'),
]
