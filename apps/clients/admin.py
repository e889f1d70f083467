from django.contrib import admin

from core.admin import SoftDeleteAdmin

from .models import Client, ClientModel, Variant


class VariantInline(admin.TabularInline):
    model  = Variant
    extra  = 0
    fields = ['name', 'qte_variante']


@admin.register(Client)
class ClientAdmin(SoftDeleteAdmin):
    list_display  = ['name', 'email', 'phone', 'created_by', 'created_at', 'is_deleted']
    list_filter   = ['is_deleted']
    search_fields = ['name', 'email']


@admin.register(ClientModel)
class ClientModelAdmin(SoftDeleteAdmin):
    list_display    = ['name', 'client', 'commandes', 'puht', 'created_at', 'is_deleted']
    list_filter     = ['is_deleted', 'client']
    search_fields   = ['name', 'commandes', 'client__name']
    readonly_fields = ['commandes', 'commandes_with_variants']
    inlines         = [VariantInline]
