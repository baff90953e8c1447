from django.contrib import admin, messages

from apps.product_delete.services import ProductDeleter

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = [
        "id",
        "post_title",
        "post_status",
        "thumbnail_display",
        "gallery_count",
    ]
    list_filter = ["post_status"]
    search_fields = ["post_title"]
    ordering = ["id"]
    actions = ["delete_with_images"]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        # Plain deletes would leave the images behind
        return False

    def thumbnail_display(self, obj):
        return obj.thumbnail_id or "-"

    thumbnail_display.short_description = "Thumbnail"

    def gallery_count(self, obj):
        return len(obj.gallery_ids)

    gallery_count.short_description = "Gallery Images"

    @admin.action(
        description="Permanently delete selected products with their images",
        permissions=["view"],
    )
    def delete_with_images(self, request, queryset):
        """Django admin action running the product deleter on a selection"""
        if not request.user.is_superuser:
            self.message_user(
                request,
                "Only superusers can delete products.",
                level=messages.ERROR,
            )
            return

        result = ProductDeleter().delete_ids(
            list(queryset.order_by("id").values_list("id", flat=True))
        )
        failed = result.failed_ids

        if result.deleted_ids:
            self.message_user(
                request,
                f"Deleted {result.deleted_count} products.",
                level=messages.SUCCESS,
            )
        if failed:
            self.message_user(
                request,
                f"Could not delete products: {', '.join(map(str, failed))}",
                level=messages.WARNING,
            )
