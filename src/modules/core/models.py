"""Base abstract models for the customer service.

Provides ``TimestampedModel``: ``created_at`` / ``modified_at`` bookkeeping
owned by the store rather than by callers.

- On insert both timestamps are taken from the same instant, so
  ``created_at == modified_at`` for a freshly created row; values set by
  the caller are overwritten.
- On update ``modified_at`` is refreshed and ``created_at`` is left out of
  the ``UPDATE`` statement entirely: an instance built without its original
  ``created_at`` can never blank or rewrite it.
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone


class TimestampedModel(models.Model):
    """Abstract base with store-maintained timestamps."""

    created_at = models.DateTimeField(editable=False)
    modified_at = models.DateTimeField(editable=False)

    class Meta:
        abstract = True

    IMMUTABLE_FIELDS = ("created_at",)

    def save(self, *args, **kwargs) -> None:
        now = timezone.now()
        self.modified_at = now

        if self._state.adding:
            self.created_at = now
            super().save(*args, **kwargs)
            return

        update_fields = kwargs.get("update_fields")
        if update_fields is None:
            update_fields = [
                field.name
                for field in self._meta.concrete_fields
                if not field.primary_key
            ]
        update_fields = [f for f in update_fields if f not in self.IMMUTABLE_FIELDS]
        if "modified_at" not in update_fields:
            update_fields.append("modified_at")
        kwargs["update_fields"] = update_fields
        super().save(*args, **kwargs)
