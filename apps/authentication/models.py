"""
Modèles de l'application Authentication.

Un seul modèle :
- User → L'utilisateur (remplace le User Django par défaut)

L'identifiant de connexion est l'email. Le rôle détermine les droits
d'écriture sur les documents (voir core.permissions).

    # Dans settings/base.py
    AUTH_USER_MODEL = 'authentication.User'
"""

import uuid
from datetime import timedelta

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.utils import timezone

from core.constants import (
    LOCKOUT_DURATION_MINUTES, MAX_LOGIN_ATTEMPTS,
    ROLE_ADMIN, ROLE_GESTIONNAIRE, USER_ROLE_CHOICES, WRITER_ROLES,
)


# ============================================================
# MANAGER PERSONNALISÉ POUR LE USER
# ============================================================

class UserManager(BaseUserManager):
    """Crée des utilisateurs identifiés par leur email (pas de username)."""

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("L'adresse email est obligatoire.")

        email = self.normalize_email(email).lower()
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)

        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """
        Usage (ligne de commande) :
            python manage.py createsuperuser
        """
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', ROLE_ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError("Le superutilisateur doit avoir is_staff=True.")
        if extra_fields.get('is_superuser') is not True:
            raise ValueError("Le superutilisateur doit avoir is_superuser=True.")

        return self.create_user(email, password, **extra_fields)


# ============================================================
# MODÈLE USER PERSONNALISÉ
# ============================================================

class User(AbstractBaseUser, PermissionsMixin):
    """
    Utilisateur de GestExport.

    Rôles :
    - admin        : voit et modifie tous les documents
    - gestionnaire : crée et modifie ses propres documents
    - lecteur      : consultation seule
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    email = models.EmailField(
        unique=True,
        verbose_name="Adresse email"
    )
    first_name = models.CharField(
        max_length=100,
        blank=True,
        verbose_name="Prénom"
    )
    last_name = models.CharField(
        max_length=100,
        blank=True,
        verbose_name="Nom"
    )

    # --- Rôle ---
    role = models.CharField(
        max_length=20,
        choices=USER_ROLE_CHOICES,
        default=ROLE_GESTIONNAIRE,
        verbose_name="Rôle"
    )

    # --- Statut du compte ---
    is_active = models.BooleanField(
        default=True,
        verbose_name="Compte actif"
    )
    is_staff = models.BooleanField(
        default=False,
        verbose_name="Accès admin"
    )

    # --- Sécurité ---
    failed_login_attempts = models.PositiveIntegerField(
        default=0,
        verbose_name="Tentatives de connexion échouées"
    )
    locked_until = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name="Compte bloqué jusqu'au"
    )

    date_joined = models.DateTimeField(
        default=timezone.now,
        verbose_name="Date d'inscription"
    )

    objects = UserManager()

    USERNAME_FIELD  = 'email'
    REQUIRED_FIELDS = ['first_name', 'last_name']

    class Meta:
        verbose_name        = "Utilisateur"
        verbose_name_plural = "Utilisateurs"
        ordering            = ['-date_joined']

    def __str__(self):
        return f"{self.full_name} <{self.email}>"

    # --- Propriétés calculées ---

    @property
    def full_name(self):
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.email

    @property
    def is_locked(self):
        return bool(self.locked_until and timezone.now() < self.locked_until)

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    @property
    def can_write(self):
        return self.role in WRITER_ROLES

    # --- Méthodes ---

    def reset_failed_attempts(self):
        self.failed_login_attempts = 0
        self.locked_until = None
        self.save(update_fields=['failed_login_attempts', 'locked_until'])

    def increment_failed_attempts(self, max_attempts=MAX_LOGIN_ATTEMPTS,
                                  lockout_minutes=LOCKOUT_DURATION_MINUTES):
        """Bloque le compte après `max_attempts` échecs consécutifs."""
        self.failed_login_attempts += 1

        if self.failed_login_attempts >= max_attempts:
            self.locked_until = timezone.now() + timedelta(minutes=lockout_minutes)

        self.save(update_fields=['failed_login_attempts', 'locked_until'])
