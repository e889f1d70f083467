"""
Vues de l'application Authentication.

Les vues restent LÉGÈRES : validation par serializer, logique dans
AuthService, erreurs au format {"error", "code"} via core.exceptions.
"""

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import AuthenticationError, first_error_message

from .serializers import LoginSerializer, UserSerializer
from .services.auth_service import AuthService


class LoginView(APIView):
    """
    POST /api/v1/auth/login/

    Corps : {"email": "...", "password": "..."}

    Réponse 200 :
    {
        "user": {...},
        "tokens": {"access": "...", "refresh": "..."}
    }
    """
    permission_classes     = [AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = LoginSerializer(data=request.data)

        if not serializer.is_valid():
            raise AuthenticationError(first_error_message(serializer.errors))

        result = AuthService.login(serializer.validated_data['user'])

        return Response({
            'user':   UserSerializer(result['user']).data,
            'tokens': result['tokens'],
        }, status=status.HTTP_200_OK)


class MeView(APIView):
    """
    GET   /api/v1/auth/me/  → Profil de l'utilisateur connecté
    PATCH /api/v1/auth/me/  → Modifier prénom / nom
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)

    def patch(self, request):
        serializer = UserSerializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)
