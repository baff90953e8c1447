"""
URL patterns for the product delete app
"""

from django.urls import path

from . import views

app_name = "product_delete"

urlpatterns = [
    path(
        "product-delete/v1/delete-products",
        views.delete_products_api,
        name="delete_products",
    ),
    path(
        "settings/product-delete/",
        views.ProductDeleteSettingsView.as_view(),
        name="settings",
    ),
]
