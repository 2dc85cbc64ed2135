"""Soft-delete infrastructure shared by the domain modules.

Rows are never removed by the API.  A record is "deleted" once its
``deleted_at`` timestamp is set; the "not deleted" predicate lives only in
``SoftDeleteQuerySet.alive()`` and every repository query starts from it.

All stored timestamps go through ``truncated_now()`` so they carry whole
seconds only.
"""

from __future__ import annotations

from datetime import datetime

from django.db import models
from django.utils import timezone


def truncated_now() -> datetime:
    """Current aware UTC time with microseconds dropped."""
    return timezone.now().replace(microsecond=0)


class SoftDeleteQuerySet(models.QuerySet):
    def alive(self) -> SoftDeleteQuerySet:
        return self.filter(deleted_at__isnull=True)

    def soft_delete(self) -> int:
        """Mark every alive row of the queryset as deleted; returns the row count."""
        return self.alive().update(deleted_at=truncated_now())

    def delete(self) -> tuple[int, dict[str, int]]:
        count = self.soft_delete()
        return count, {self.model._meta.label: count}


class SoftDeleteManager(models.Manager.from_queryset(SoftDeleteQuerySet)):
    """``Model.objects`` is unfiltered; call ``.alive()`` to hide deleted rows."""


class SoftDeleteModel(models.Model):
    deleted_at = models.DateTimeField(null=True, blank=True, default=None, db_index=True)

    objects = SoftDeleteManager()

    class Meta:
        abstract = True

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def delete(self, using=None, keep_parents=False) -> tuple[int, dict[str, int]]:
        """Soft-delete this row.  Deleting an already deleted row affects nothing."""
        if self.is_deleted:
            return 0, {}
        self.deleted_at = truncated_now()
        self.save(using=using, update_fields=["deleted_at"])
        return 1, {self._meta.label: 1}
