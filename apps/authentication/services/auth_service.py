"""
Service d'authentification.

- View   : reçoit la requête, appelle le service, retourne la réponse
- Service: logique métier (tokens, dernière connexion)
"""

import logging

from django.utils import timezone
from rest_framework_simplejwt.tokens import RefreshToken

from ..models import User

logger = logging.getLogger('gestexport')


class AuthService:

    @staticmethod
    def login(user: User) -> dict:
        """
        Connecte un utilisateur déjà validé par LoginSerializer.

        Returns:
            dict : {'user': User, 'tokens': {'access': ..., 'refresh': ...}}
        """
        user.last_login = timezone.now()
        user.save(update_fields=['last_login'])
        logger.info(f"Connexion de {user.email}")

        return {
            'user':   user,
            'tokens': AuthService.generate_tokens(user),
        }

    @staticmethod
    def generate_tokens(user: User) -> dict:
        """
        Paire de tokens JWT. Le payload transporte l'email et le rôle
        pour que le frontend adapte l'affichage sans appel supplémentaire.
        """
        refresh = RefreshToken.for_user(user)
        refresh['email'] = user.email
        refresh['role']  = user.role

        return {
            'access':  str(refresh.access_token),
            'refresh': str(refresh),
        }
