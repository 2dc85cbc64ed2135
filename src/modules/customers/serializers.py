"""Customer DRF serializer for API output.

The serializer operates at the Interface layer (API Views) and only
renders responses.  Request bodies are parsed into Pydantic DTOs from
``dtos.py`` and validated by ``validators.py`` before reaching the
Service Layer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    """Read-only representation of a Customer.

    ``deleted_at`` is not exposed; ``updated_at`` renders as
    ``null`` until the first update.
    """

    class Meta:
        model = Customer
        fields = [
            "id",
            "customer_number",
            "first_name",
            "last_name",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
