from django.contrib import admin

from core.admin import SoftDeleteAdmin

from .models import Livraison, LivraisonLine


class LivraisonLineInline(admin.TabularInline):
    model    = LivraisonLine
    extra    = 0
    fields   = ['position', 'modele', 'commande', 'description', 'quantity']
    ordering = ['position']


@admin.register(Livraison)
class LivraisonAdmin(SoftDeleteAdmin):
    list_display  = ['numero', 'client_name', 'date_livraison', 'created_by', 'created_at', 'is_deleted']
    list_filter   = ['is_deleted', 'date_livraison']
    search_fields = ['numero', 'client_name', 'adresse']
    inlines       = [LivraisonLineInline]
