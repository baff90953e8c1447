from django.contrib import admin
from django.http import HttpResponseRedirect
from django.urls import reverse

from .models import ProductDeleteSettings


@admin.register(ProductDeleteSettings)
class ProductDeleteSettingsAdmin(admin.ModelAdmin):
    """
    Menu entry for the settings page; the record itself is a singleton
    """

    list_display = ["limit", "updated_at"]
    readonly_fields = ["created_at", "updated_at"]

    def has_add_permission(self, request):
        if ProductDeleteSettings.objects.exists():
            return False
        return super().has_add_permission(request)

    def has_delete_permission(self, request, obj=None):
        return False

    def changelist_view(self, request, extra_context=None):
        """Send the admin menu entry to the settings page"""
        return HttpResponseRedirect(reverse("product_delete:settings"))
