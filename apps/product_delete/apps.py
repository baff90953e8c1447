"""
Product delete app configuration
"""

from django.apps import AppConfig


class ProductDeleteConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.product_delete"
    verbose_name = "Product Delete"
