"""Unit tests for the Customer DRF serializer.

Covers:
- Field presence and read-only constraints.
- Serialization of a stored and an updated Customer.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from modules.customers.models import Customer
from modules.customers.serializers import CustomerSerializer

pytestmark = pytest.mark.unit

CREATED_AT = datetime(2021, 1, 1, 10, 30, tzinfo=timezone.utc)

EXPECTED_FIELDS = {
    "id",
    "customer_number",
    "first_name",
    "last_name",
    "created_at",
    "updated_at",
}


def _make_customer(**overrides) -> Customer:
    defaults = {
        "customer_number": 2,
        "first_name": "Danilo",
        "last_name": "Sano",
        "created_at": CREATED_AT,
    }
    defaults.update(overrides)
    customer = Customer(**defaults)
    customer.save()
    return customer


class TestCustomerSerializerFields:
    def test_exposes_expected_fields(self):
        assert set(CustomerSerializer().fields) == EXPECTED_FIELDS

    def test_does_not_expose_deleted_at(self):
        assert "deleted_at" not in CustomerSerializer().fields

    def test_all_fields_read_only(self):
        for name, field in CustomerSerializer().fields.items():
            assert field.read_only, name


class TestCustomerSerialization:
    def test_serializes_new_customer(self):
        customer = _make_customer()
        data = CustomerSerializer(customer).data

        assert data["id"] == customer.id
        assert data["customer_number"] == 2
        assert data["first_name"] == "Danilo"
        assert data["last_name"] == "Sano"
        assert data["created_at"] == "2021-01-01T10:30:00Z"
        assert data["updated_at"] is None

    def test_serializes_updated_at_once_set(self):
        customer = _make_customer(
            updated_at=datetime(2021, 1, 2, 8, 0, tzinfo=timezone.utc)
        )
        data = CustomerSerializer(customer).data

        assert data["updated_at"] == "2021-01-02T08:00:00Z"

    def test_serializes_many(self):
        _make_customer(customer_number=1)
        _make_customer(customer_number=5)
        data = CustomerSerializer(Customer.objects.alive(), many=True).data

        assert [item["customer_number"] for item in data] == [1, 5]
