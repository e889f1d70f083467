"""
Base d'administration des modèles à suppression logique.

Le manager par défaut masque les objets supprimés ; l'administration
les liste tous (filtre "Supprimé") et permet de les restaurer.
"""

from django.contrib import admin


class SoftDeleteAdmin(admin.ModelAdmin):
    actions = ['restore_selected']

    def get_queryset(self, request):
        qs = self.model.all_objects.get_queryset()
        ordering = self.get_ordering(request)
        if ordering:
            qs = qs.order_by(*ordering)
        return qs

    @admin.action(description="Restaurer les éléments sélectionnés")
    def restore_selected(self, request, queryset):
        count = queryset.restore()
        self.message_user(request, f"{count} élément(s) restauré(s).")
