"""
Base models and mixins for the runner app.
"""

from django.db import models


class TimeStampedModel(models.Model):
    """Abstract base model that adds created_at and updated_at timestamps."""

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True, db_index=True)

    class Meta:
        abstract = True


class SingletonModel(models.Model):
    """Abstract base model stored as a single row with pk=1."""

    SINGLETON_PK = 1

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_PK
        if self._state.adding:
            existing = type(self).objects.filter(pk=self.pk).first()
            if existing is not None:
                # Saving a fresh instance overwrites the stored row
                for field in self._meta.concrete_fields:
                    if getattr(field, "auto_now_add", False):
                        setattr(self, field.attname, getattr(existing, field.attname))
                self._state.adding = False
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        # The row is the only place settings live; keep it.
        return 0, {}

    @classmethod
    def load(cls):
        """Return the singleton row, creating it with field defaults if absent."""
        obj, _ = cls.objects.get_or_create(pk=cls.SINGLETON_PK)
        return obj
