from django.contrib import admin

from core.admin import SoftDeleteAdmin

from .models import Commande


@admin.register(Commande)
class CommandeAdmin(SoftDeleteAdmin):
    list_display  = ['name', 'created_by', 'created_at', 'is_deleted']
    list_filter   = ['is_deleted']
    search_fields = ['name']
