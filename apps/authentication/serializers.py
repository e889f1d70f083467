"""
Serializers de l'application Authentication.

Flux de connexion :
    Client → POST /auth/login/ {"email": "...", "password": "..."}
    → LoginSerializer.is_valid()      # Vérifie les identifiants
    → AuthService.login()             # Génère les tokens
    → UserSerializer(user).data       # Formate la réponse
"""

from rest_framework import serializers

from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Profil de l'utilisateur connecté (GET/PATCH /auth/me/)."""
    full_name = serializers.CharField(read_only=True)

    class Meta:
        model  = User
        fields = [
            'id', 'email', 'first_name', 'last_name', 'full_name',
            'role', 'is_active', 'date_joined', 'last_login',
        ]
        # Le rôle et le statut ne se modifient que dans l'admin
        read_only_fields = [
            'id', 'email', 'role', 'is_active', 'date_joined', 'last_login',
        ]


class LoginSerializer(serializers.Serializer):
    """
    Valide les identifiants de connexion.

    Les erreurs sont volontairement identiques pour un email inconnu et
    un mauvais mot de passe.
    """
    email    = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )

    INVALID_CREDENTIALS = "Email ou mot de passe incorrect."

    def validate(self, attrs):
        email    = attrs.get('email', '').lower()
        password = attrs.get('password')

        try:
            user = User.objects.get(email=email)
        except User.DoesNotExist:
            raise serializers.ValidationError(self.INVALID_CREDENTIALS)

        if user.is_locked:
            raise serializers.ValidationError(
                "Compte temporairement bloqué suite à trop de tentatives. "
                "Réessayez plus tard."
            )

        if not user.check_password(password):
            user.increment_failed_attempts()
            raise serializers.ValidationError(self.INVALID_CREDENTIALS)

        if not user.is_active:
            raise serializers.ValidationError(
                "Ce compte est désactivé. Contactez l'administrateur."
            )

        user.reset_failed_attempts()

        attrs['user'] = user
        return attrs
