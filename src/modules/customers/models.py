"""Customer model with soft delete.

Business rules backed at the storage level:
- ``customer_number`` must be positive (check constraint).
- ``customer_number`` is unique among non-deleted rows (partial unique
  constraint).  The Service Layer checks first and raises a readable
  conflict; the constraint catches concurrent writers that race past that
  check.
- Soft delete via ``deleted_at`` (inherited from ``SoftDeleteModel``).
"""

from __future__ import annotations

from django.db import models

from modules.core.models import SoftDeleteModel


class Customer(SoftDeleteModel):
    """Customer aggregate root.

    ``id`` is an auto-increment integer, never reused.  ``created_at`` is
    stamped by the Service Layer, not by the database, so the value the
    caller sees is the one that was written.  ``updated_at`` stays ``NULL``
    until the first update.
    """

    id = models.AutoField(primary_key=True)
    customer_number = models.IntegerField()
    first_name = models.CharField(max_length=255)
    last_name = models.CharField(max_length=255)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField(null=True, blank=True, default=None)

    class Meta:
        db_table = "customers"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["customer_number"],
                condition=models.Q(deleted_at__isnull=True),
                name="customers_alive_customer_number_uniq",
            ),
            models.CheckConstraint(
                condition=models.Q(customer_number__gt=0),
                name="customers_customer_number_positive",
            ),
        ]
