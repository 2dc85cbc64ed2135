"""Unit tests for validate_customer_request."""

from __future__ import annotations

import pytest

from modules.core.exceptions import ValidationError
from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
from modules.customers.validators import validate_customer_request

pytestmark = pytest.mark.unit


@pytest.fixture(params=[CreateCustomerDTO, UpdateCustomerDTO], ids=["create", "update"])
def dto_class(request):
    return request.param


class TestValidRequest:
    def test_complete_request_passes(self, dto_class):
        dto = dto_class(customer_number=2, first_name="Danilo", last_name="Sano")
        assert validate_customer_request(dto) is None


class TestCustomerNumberRules:
    def test_absent_customer_number(self, dto_class):
        dto = dto_class(first_name="Danilo", last_name="Sano")
        with pytest.raises(ValidationError, match="customer number is required") as exc:
            validate_customer_request(dto)
        assert exc.value.field == "customer_number"

    def test_zero_customer_number(self, dto_class):
        dto = dto_class(customer_number=0, first_name="Danilo", last_name="Sano")
        with pytest.raises(ValidationError, match="must be greater than 0") as exc:
            validate_customer_request(dto)
        assert exc.value.field == "customer_number"

    def test_negative_customer_number(self, dto_class):
        dto = dto_class(customer_number=-5, first_name="Danilo", last_name="Sano")
        with pytest.raises(ValidationError, match="must be greater than 0"):
            validate_customer_request(dto)


class TestNameRules:
    def test_empty_first_name(self, dto_class):
        dto = dto_class(customer_number=2, first_name="", last_name="Sano")
        with pytest.raises(ValidationError, match="first name is required") as exc:
            validate_customer_request(dto)
        assert exc.value.field == "first_name"

    def test_null_first_name(self, dto_class):
        dto = dto_class(customer_number=2, first_name=None, last_name="Sano")
        with pytest.raises(ValidationError, match="first name is required"):
            validate_customer_request(dto)

    def test_empty_last_name(self, dto_class):
        dto = dto_class(customer_number=2, first_name="Danilo", last_name="")
        with pytest.raises(ValidationError, match="last name is required") as exc:
            validate_customer_request(dto)
        assert exc.value.field == "last_name"


class TestRuleOrder:
    def test_customer_number_reported_before_names(self, dto_class):
        dto = dto_class()
        with pytest.raises(ValidationError) as exc:
            validate_customer_request(dto)
        assert exc.value.field == "customer_number"

    def test_first_name_reported_before_last_name(self, dto_class):
        dto = dto_class(customer_number=1)
        with pytest.raises(ValidationError) as exc:
            validate_customer_request(dto)
        assert exc.value.field == "first_name"
