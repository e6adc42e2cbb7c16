"""Base abstract model shared by the catalogue entities.

Provides ``BaseModel``: UUIDv7 primary key, ``created_at`` / ``updated_at``
timestamps and a ``version`` bookkeeping counter.

- ``created_at`` and ``updated_at`` receive the *same* instant when a row is
  first inserted; afterwards only ``updated_at`` moves.
- ``save()`` guard ensures ``updated_at`` is included when ``update_fields``
  is specified.
"""

from __future__ import annotations

import uuid6
from django.db import models
from django.utils import timezone


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and timestamp bookkeeping."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(editable=False, blank=True)
    updated_at = models.DateTimeField(editable=False, blank=True)
    version = models.PositiveIntegerField(default=0, editable=False)

    class Meta:
        abstract = True

    def touch(self) -> None:
        """Stamp the timestamps for the upcoming write."""
        now = timezone.now()
        if self._state.adding or self.created_at is None:
            self.created_at = now
        self.updated_at = now

    def save(self, *args, **kwargs) -> None:
        """Refresh ``updated_at`` on every write (``created_at`` only on insert)."""
        self.touch()
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)
