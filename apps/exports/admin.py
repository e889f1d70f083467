from django.contrib import admin

from core.admin import SoftDeleteAdmin

from .models import DeclarationExport, ExportLine


class ExportLineInline(admin.TabularInline):
    model    = ExportLine
    extra    = 0
    fields   = ['position', 'modele', 'commande', 'description', 'quantity', 'unit_price', 'is_excluded']
    ordering = ['position']


@admin.register(DeclarationExport)
class DeclarationExportAdmin(SoftDeleteAdmin):
    list_display  = ['numero', 'client_name', 'date_export', 'lot', 'created_by', 'created_at', 'is_deleted']
    list_filter   = ['is_deleted', 'date_export']
    search_fields = ['numero', 'client_name', 'lot']
    inlines       = [ExportLineInline]
