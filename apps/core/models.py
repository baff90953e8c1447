"""
Core models for the Product Delete service
"""

from django.db import models


class TimeStampedModel(models.Model):
    """
    Abstract base class that provides self-updating
    'created' and 'modified' fields.
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class SingletonModel(TimeStampedModel):
    """
    Abstract base class for settings records that hold exactly one row
    """

    SINGLETON_PK = 1

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_PK
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        """
        Return the stored row, or an unsaved instance holding field defaults
        """
        instance = cls.objects.filter(pk=cls.SINGLETON_PK).first()
        if instance is None:
            instance = cls(pk=cls.SINGLETON_PK)
        return instance
