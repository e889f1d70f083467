"""
Interface admin Django pour les utilisateurs.

Accessible sur : http://127.0.0.1:8000/admin/
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):

    list_display  = ['email', 'full_name', 'role', 'is_active', 'date_joined']
    list_filter   = ['role', 'is_active']
    search_fields = ['email', 'first_name', 'last_name']
    ordering      = ['-date_joined']

    fieldsets = (
        ('Identité',    {'fields': ('email', 'first_name', 'last_name')}),
        ('Rôle',        {'fields': ('role',)}),
        ('Sécurité',    {'fields': ('password', 'failed_login_attempts', 'locked_until')}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser',
                                    'groups', 'user_permissions')}),
        ('Dates',       {'fields': ('date_joined', 'last_login')}),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields':  ('email', 'first_name', 'last_name', 'password1', 'password2', 'role'),
        }),
    )

    filter_horizontal = ('groups', 'user_permissions')
