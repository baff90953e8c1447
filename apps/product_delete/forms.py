"""
Forms for the product delete settings page
"""

from django import forms
from django.conf import settings

from .models import ProductDeleteSettings


class ProductDeleteSettingsForm(forms.ModelForm):
    limit = forms.IntegerField(
        label="Delete Limit",
        min_value=1,
        max_value=settings.PRODUCT_DELETE_MAX_LIMIT,
        help_text="Products deleted per request when the request sends no limit.",
    )

    class Meta:
        model = ProductDeleteSettings
        fields = ["limit"]
