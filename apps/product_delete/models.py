"""
Product delete settings model
"""

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.core.models import SingletonModel


def default_limit():
    return settings.PRODUCT_DELETE_DEFAULT_LIMIT


def max_limit():
    return settings.PRODUCT_DELETE_MAX_LIMIT


class ProductDeleteSettings(SingletonModel):
    """
    Persisted configuration controlling the deletion batch size
    """

    limit = models.PositiveIntegerField(
        default=default_limit,
        validators=[MinValueValidator(1), MaxValueValidator(max_limit)],
        help_text="Number of products deleted per request when no limit is given",
    )

    class Meta:
        db_table = "product_delete_settings"
        verbose_name = "Product delete settings"
        verbose_name_plural = "Product delete settings"

    def __str__(self):
        return f"Product delete settings (limit={self.limit})"
