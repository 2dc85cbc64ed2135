import logging

import pytest

from config.settings import mask_sensitive_data

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    def test_password_masked_in_log_output(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]
        assert result["data"].startswith("password=")

    def test_token_masked_in_log_output(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_authorization_masked_in_log_output(self):
        event_dict = {"event": "test", "header": "Authorization: Bearer-xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "Bearer-xyz" not in result["header"]

    def test_non_sensitive_data_unchanged(self):
        event_dict = {"event": "customer.created", "first_name": "Danilo", "customer_number": 2}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["first_name"] == "Danilo"
        assert result["customer_number"] == 2
        assert result["event"] == "customer.created"


class TestUnhandledErrorLogging:
    def test_storage_failure_is_logged(self, api_client, caplog, monkeypatch):
        from django.db import DatabaseError

        from modules.customers.repositories.django_repository import CustomerDjangoRepository

        def broken(self):
            raise DatabaseError("connection lost")

        monkeypatch.setattr(CustomerDjangoRepository, "list", broken)

        with caplog.at_level(logging.ERROR):
            api_client.get("/api/v1/customers")

        assert any("api.unhandled_error" in r.getMessage() for r in caplog.records)
